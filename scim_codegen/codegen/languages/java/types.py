"""
Attribute type mapping for generated Java classes.

Maps SCIM attribute types to the declared Java type and the
``ScimObjectNode`` accessor that reads the value back.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.generator import GeneratorError, UnsupportedAttributeTypeError
from ...core.schema import AttributeType, SchemaAttribute, SchemaError

logger = get_logger(__name__)


@dataclass(frozen=True)
class JavaType:
    """A Java type together with the method that reads it from a node."""

    name: str
    read_method: str


STRING_TYPE = JavaType("String", "getStringAttribute")

DEFAULT_TYPE_MAP: Dict[AttributeType, JavaType] = {
    AttributeType.STRING: STRING_TYPE,
    AttributeType.REFERENCE: STRING_TYPE,
    AttributeType.BOOLEAN: JavaType("Boolean", "getBooleanAttribute"),
    AttributeType.INTEGER: JavaType("Long", "getLongAttribute"),
    AttributeType.DECIMAL: JavaType("Double", "getDoubleAttribute"),
    AttributeType.DATE_TIME: JavaType("Instant", "getDateTimeAttribute"),
    AttributeType.BINARY: JavaType("byte[]", "getBinaryAttribute"),
}

FALLBACK_POLICY = "fallback"
STRICT_POLICY = "strict"


class JavaTypeMapper:
    """Resolves the Java type of a simple attribute."""

    def __init__(
        self,
        unknown_type_policy: str = FALLBACK_POLICY,
        type_overrides: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the mapper.

        Args:
            unknown_type_policy: 'fallback' maps unsupported types to String,
                'strict' raises UnsupportedAttributeTypeError
            type_overrides: Attribute type value to a Java type name, or to an
                object with "java_type" and "read_method"
        """
        if unknown_type_policy not in (FALLBACK_POLICY, STRICT_POLICY):
            raise GeneratorError(f"Invalid unknown_type_policy: {unknown_type_policy}")
        self.unknown_type_policy = unknown_type_policy
        self.type_overrides = dict(type_overrides or {})

    def map_attribute(self, attribute: SchemaAttribute) -> JavaType:
        """
        Map a simple attribute to its Java type.

        Args:
            attribute: A non-complex attribute

        Returns:
            JavaType to declare and read the attribute with

        Raises:
            UnsupportedAttributeTypeError: Under the strict policy, for types
                without a mapping
        """
        if attribute.is_complex:
            raise GeneratorError(
                f"Complex attribute '{attribute.name}' has no simple Java type"
            )

        java_type = DEFAULT_TYPE_MAP.get(attribute.type)
        if java_type is None:
            if self.unknown_type_policy == STRICT_POLICY:
                raise UnsupportedAttributeTypeError(attribute.name, attribute.type)
            logger.debug(
                "Attribute '%s' of type %r generated as String",
                attribute.name,
                attribute.type,
            )
            java_type = STRING_TYPE

        type_key = getattr(attribute.type, "value", attribute.type)
        override = self.type_overrides.get(type_key)
        if isinstance(override, dict):
            java_type = JavaType(
                override.get("java_type", java_type.name),
                override.get("read_method", java_type.read_method),
            )
        elif override:
            java_type = JavaType(override, java_type.read_method)

        return java_type

    def override_warnings(self) -> List[str]:
        """
        Report overrides that change the Java type but keep the default reader.

        A plain type name keeps the read method of the type it replaces, e.g.
        ``{"integer": "Integer"}`` still reads with ``getLongAttribute``.
        """
        warnings = []
        for type_key, override in sorted(self.type_overrides.items()):
            if not isinstance(override, str):
                continue
            try:
                default = DEFAULT_TYPE_MAP.get(AttributeType.from_value(type_key))
            except SchemaError:
                continue
            if default is not None and default.name != override:
                warnings.append(
                    f"Type override '{type_key}' -> '{override}' still reads values "
                    f"with {default.read_method}; set 'read_method' to match"
                )
        return warnings
