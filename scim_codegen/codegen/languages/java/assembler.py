"""
Class body assembly.

Folds an ordered attribute list into constructor, accessor and nested type
text. Output order always follows attribute order.
"""

from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import GeneratorError, MissingSchemaNameError
from ...core.naming import JavaNameSanitizer, capitalize
from ...core.schema import SchemaAttribute
from ...core.templates import TemplateEngine
from .builders import AccessorPairBuilder, GeneratedFragment, NestedGroupBuilder
from .types import JavaTypeMapper

logger = get_logger(__name__)


class StructureAssembler:
    """Assembles the body of a generated type from its attributes."""

    def __init__(
        self,
        engine: TemplateEngine,
        config: GeneratorConfig,
        type_mapper: Optional[JavaTypeMapper] = None,
        sanitizer: Optional[JavaNameSanitizer] = None,
    ):
        self.engine = engine
        self.config = config
        self.type_mapper = type_mapper or JavaTypeMapper(
            config.unknown_type_policy, config.type_overrides
        )
        self.sanitizer = sanitizer or JavaNameSanitizer()

        self.accessor_builder = AccessorPairBuilder(
            engine, config, self.type_mapper, self.sanitizer
        )
        self.nested_builder = NestedGroupBuilder(engine, config, self, self.sanitizer)

    def build_fragment(self, attribute: SchemaAttribute) -> GeneratedFragment:
        """Dispatch an attribute to the nested or the accessor builder."""
        if attribute.is_complex:
            return self.nested_builder.build(attribute)
        return self.accessor_builder.build(attribute)

    def assemble(self, name: Optional[str], attributes: List[SchemaAttribute]) -> str:
        """
        Assemble a type body.

        Args:
            name: Name the constructor is derived from
            attributes: Ordered attributes of the type

        Returns:
            Constructor followed by accessor pairs, then nested types

        Raises:
            MissingSchemaNameError: If name is absent
        """
        parameters = []
        setter_calls = []
        accessor_definitions = []
        nested_type_definitions = []

        for attribute in attributes:
            logger.debug(
                "Dispatching attribute '%s' (%s)",
                attribute.name,
                getattr(attribute.type, "value", attribute.type),
            )
            fragment = self.build_fragment(attribute)

            if bool(fragment.accessor_definition) == bool(
                fragment.nested_type_definition
            ):
                raise GeneratorError(
                    f"Attribute '{attribute.name}' must produce exactly one of "
                    "accessor pair or nested type"
                )

            parameters.append(fragment.parameter)
            setter_calls.append(fragment.setter_call)
            if fragment.accessor_definition:
                accessor_definitions.append(fragment.accessor_definition)
            if fragment.nested_type_definition:
                nested_type_definitions.append(fragment.nested_type_definition)

        constructor = self.build_constructor(name, parameters, setter_calls)
        return "\n\n".join([constructor] + accessor_definitions + nested_type_definitions)

    def build_constructor(
        self, name: Optional[str], parameters: List[str], setter_calls: List[str]
    ) -> str:
        """Render the constructor; a constructor cannot be anonymous."""
        if not name:
            raise MissingSchemaNameError(
                "Cannot generate a constructor for a schema without a name"
            )

        return self.engine.render_template(
            "constructor.java.j2",
            {
                "name": capitalize(name),
                "parameters": parameters,
                "setter_calls": setter_calls,
                "pad": " " * self.config.indent_size,
            },
        )
