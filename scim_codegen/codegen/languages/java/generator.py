"""
Java resource class generator.

Wraps the assembled class body with the package line, the import list and
the class declaration.
"""

from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import JavaNameSanitizer, class_name_for
from ...core.schema import ResourceSchema
from .assembler import StructureAssembler
from .types import JavaTypeMapper

logger = get_logger(__name__)


class JavaResourceGenerator(CodeGenerator):
    """Generates a Java class extending ResourceNode from a resource schema."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

        self.sanitizer = JavaNameSanitizer()
        self.type_mapper = JavaTypeMapper(
            self.config.unknown_type_policy, self.config.type_overrides
        )
        self.assembler = StructureAssembler(
            self.template_engine, self.config, self.type_mapper, self.sanitizer
        )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def validate_schema(self, schema: ResourceSchema) -> List[str]:
        """Schema warnings plus type overrides that read with the wrong method."""
        return super().validate_schema(schema) + self.type_mapper.override_warnings()

    def generate(self, schema: ResourceSchema) -> str:
        """Generate the complete Java document for a schema."""
        class_name = class_name_for(schema.name)
        body = self.assembler.assemble(schema.name, schema.attributes)

        code = self.render_template(
            "document.java.j2",
            {
                "package_name": self.config.package_name,
                "imports": self.config.imports,
                "description": schema.description or "",
                "class_name": class_name,
                "base_type": self.config.base_type,
                "body": body,
                "indent_size": self.config.indent_size,
            },
        )
        logger.info(
            "Generated class %s from %d attributes", class_name, len(schema.attributes)
        )
        return code

    def generate_class_from_schema(self, schema: ResourceSchema) -> str:
        """Generate and format the document for a schema."""
        return self.format_code(self.generate(schema))


def create_java_generator(config: Optional[GeneratorConfig] = None) -> JavaResourceGenerator:
    """Create a Java generator, using the default configuration when none is given."""
    return JavaResourceGenerator(config)
