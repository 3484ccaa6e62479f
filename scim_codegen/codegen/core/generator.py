"""
Base generator interface for all code generation targets.

Defines the contract that generators implement, the error taxonomy and the
result container returned by ``generate_code``.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .schema import AttributeType, ResourceSchema, SchemaAttribute
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class MissingSchemaNameError(GeneratorError):
    """Raised when a constructor has to be named but the schema has no name."""

    pass


class UnsupportedAttributeTypeError(GeneratorError):
    """Raised for attribute types the generator cannot map."""

    def __init__(self, attribute_name: str, attribute_type: Any):
        self.attribute_name = attribute_name
        self.attribute_type = attribute_type
        type_name = getattr(attribute_type, "value", attribute_type)
        super().__init__(
            f"Unsupported type '{type_name}' for attribute '{attribute_name}'"
        )


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: ResourceSchema) -> str:
        """
        Generate the artifact for one resource schema.

        Args:
            schema: Schema to generate code for

        Returns:
            Generated code as a string
        """
        pass

    def validate_schema(self, schema: ResourceSchema) -> List[str]:
        """
        Check a schema for structural oddities worth reporting.

        Args:
            schema: Schema to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        label = schema.name or schema.id or "<unnamed>"

        if not schema.attributes:
            warnings.append(f"Schema '{label}' has no attributes")

        def check(attributes: List[SchemaAttribute], path: str):
            for attribute in attributes:
                qualified = f"{path}.{attribute.name}"
                if attribute.is_complex and not attribute.sub_attributes:
                    warnings.append(
                        f"Complex attribute {qualified} has no sub-attributes"
                    )
                if attribute.type == AttributeType.ANY:
                    warnings.append(f"Attribute {qualified} has type 'any'")
                if attribute.is_complex:
                    check(attribute.sub_attributes, qualified)

        check(schema.attributes, label)
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: ResourceSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        code = generator.generate(schema)
        formatted_code = generator.format_code(code)
    except (GeneratorError, TemplateError) as e:
        logger.warning("Code generation failed for schema %r: %s", schema.name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "schema_name": schema.name,
        "attribute_count": len(schema.attributes),
        "nested_type_count": schema.count_complex_attributes(),
        "max_depth": schema.max_depth(),
    }

    return GenerationResult(formatted_code, warnings, metadata)
