"""
Per-attribute builders.

Each builder turns one attribute into a ``GeneratedFragment``: the text the
assembler needs to wire the attribute into the enclosing constructor, plus
either an accessor pair or a nested type definition.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.naming import JavaNameSanitizer, capitalize
from ...core.schema import SchemaAttribute
from ...core.templates import TemplateEngine
from .types import JavaTypeMapper

if TYPE_CHECKING:
    from .assembler import StructureAssembler

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedFragment:
    """Generated text for one attribute."""

    setter_call: str
    parameter: str
    accessor_definition: str = ""
    nested_type_definition: str = ""


def setter_call(method_suffix: str, parameter_name: str) -> str:
    return f"set{method_suffix}({parameter_name});"


class AccessorPairBuilder:
    """Builds getter and setter for a simple attribute."""

    def __init__(
        self,
        engine: TemplateEngine,
        config: GeneratorConfig,
        type_mapper: JavaTypeMapper,
        sanitizer: JavaNameSanitizer,
    ):
        self.engine = engine
        self.config = config
        self.type_mapper = type_mapper
        self.sanitizer = sanitizer

    def build(self, attribute: SchemaAttribute) -> GeneratedFragment:
        """
        Build the accessor pair for a simple attribute.

        Args:
            attribute: Attribute that is not complex

        Returns:
            Fragment with accessor definition, setter call and parameter
        """
        java_type = self.type_mapper.map_attribute(attribute)
        method_suffix = capitalize(attribute.name)
        parameter_name = self.sanitizer.parameter_name(attribute.name)

        context = {
            "attribute_name": attribute.name,
            "method_suffix": method_suffix,
            "parameter_name": parameter_name,
            "java_type": java_type.name,
            "read_method": java_type.read_method,
            "pad": " " * self.config.indent_size,
            "description": attribute.description if self.config.add_comments else None,
        }
        getter = self.engine.render_template("getter.java.j2", context)
        setter = self.engine.render_template("setter.java.j2", context)

        return GeneratedFragment(
            setter_call=setter_call(method_suffix, parameter_name),
            parameter=f"{java_type.name} {parameter_name}",
            accessor_definition=f"{getter}\n\n{setter}",
        )


class NestedGroupBuilder:
    """Builds a nested type for a complex attribute."""

    def __init__(
        self,
        engine: TemplateEngine,
        config: GeneratorConfig,
        assembler: "StructureAssembler",
        sanitizer: JavaNameSanitizer,
    ):
        self.engine = engine
        self.config = config
        self.assembler = assembler
        self.sanitizer = sanitizer

    def build(self, attribute: SchemaAttribute) -> GeneratedFragment:
        """
        Build the nested type for a complex attribute.

        The nested type's body comes from a recursive assembler pass over the
        sub-attributes. No accessor pair is produced for the attribute itself.

        Args:
            attribute: Complex attribute

        Returns:
            Fragment with nested type definition, setter call and parameter
        """
        type_name = capitalize(attribute.name)
        logger.debug(
            "Generating nested type %s with %d sub-attributes",
            type_name,
            len(attribute.sub_attributes),
        )
        body = self.assembler.assemble(attribute.name, attribute.sub_attributes)

        definition = self.engine.render_template(
            "nested_type.java.j2",
            {
                "name": type_name,
                "base_type": self.config.nested_base_type,
                "body": body,
                "indent_size": self.config.indent_size,
                "description": (
                    attribute.description if self.config.add_comments else None
                ),
            },
        )
        parameter_name = self.sanitizer.parameter_name(attribute.name)

        return GeneratedFragment(
            setter_call=setter_call(type_name, parameter_name),
            parameter=f"{type_name} {parameter_name}",
            nested_type_definition=definition,
        )
