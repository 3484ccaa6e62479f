"""
Resource schema representation for code generation.

Converts parsed SCIM schema documents into a normalized internal format
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum


class SchemaError(Exception):
    """Exception raised when a schema document cannot be converted."""

    pass


class AttributeType(Enum):
    """SCIM attribute types."""

    STRING = "string"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    DATE_TIME = "dateTime"
    BINARY = "binary"
    REFERENCE = "reference"
    COMPLEX = "complex"
    ANY = "any"

    @classmethod
    def from_value(cls, value: str) -> "AttributeType":
        """
        Resolve a type tag as written in a schema document.

        Args:
            value: Type tag, matched case-insensitively (e.g. 'dateTime')

        Returns:
            The matching AttributeType

        Raises:
            SchemaError: If the tag is not a known SCIM type
        """
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        raise SchemaError(f"Unknown attribute type: {value!r}")


@dataclass
class SchemaAttribute:
    """Represents a single attribute of a resource schema."""

    name: str
    type: AttributeType = AttributeType.STRING
    description: Optional[str] = None
    multi_valued: bool = False
    required: bool = False
    case_exact: bool = False
    mutability: str = "readWrite"
    returned: str = "default"
    uniqueness: str = "none"
    canonical_values: List[str] = field(default_factory=list)

    # Only populated for complex attributes
    sub_attributes: List["SchemaAttribute"] = field(default_factory=list)

    @property
    def is_complex(self) -> bool:
        """Check if this attribute is a nested attribute group."""
        return self.type == AttributeType.COMPLEX

    def get_sub_attribute(self, name: str) -> Optional["SchemaAttribute"]:
        """Get sub-attribute by name."""
        for attribute in self.sub_attributes:
            if attribute.name == name:
                return attribute
        return None


@dataclass
class ResourceSchema:
    """Represents a SCIM resource schema such as User or Group."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    attributes: List[SchemaAttribute] = field(default_factory=list)
    schemas: List[str] = field(default_factory=list)

    def add_attribute(self, attribute: SchemaAttribute) -> None:
        """Add an attribute to this schema."""
        self.attributes.append(attribute)

    def get_attribute(self, name: str) -> Optional[SchemaAttribute]:
        """Get attribute by name."""
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def max_depth(self) -> int:
        """Get the deepest nesting level, 1 for a schema without complex attributes."""

        def depth_of(attributes: List[SchemaAttribute], current: int) -> int:
            deepest = current
            for attribute in attributes:
                if attribute.is_complex:
                    deepest = max(
                        deepest, depth_of(attribute.sub_attributes, current + 1)
                    )
            return deepest

        return depth_of(self.attributes, 1)

    def count_complex_attributes(self) -> int:
        """Count complex attributes at every nesting level."""

        def count(attributes: List[SchemaAttribute]) -> int:
            total = 0
            for attribute in attributes:
                if attribute.is_complex:
                    total += 1 + count(attribute.sub_attributes)
            return total

        return count(self.attributes)


def attribute_from_dict(document: Dict[str, Any]) -> SchemaAttribute:
    """
    Convert one attribute definition of a schema document.

    Args:
        document: Parsed attribute definition

    Returns:
        SchemaAttribute with its sub-attributes converted recursively

    Raises:
        SchemaError: If the definition is not an object or has an unknown type
    """
    if not isinstance(document, dict):
        raise SchemaError(f"Attribute definition must be an object, got {document!r}")

    attribute = SchemaAttribute(
        name=document.get("name"),
        type=AttributeType.from_value(document.get("type", "string")),
        description=document.get("description"),
        multi_valued=bool(document.get("multiValued", False)),
        required=bool(document.get("required", False)),
        case_exact=bool(document.get("caseExact", False)),
        mutability=document.get("mutability", "readWrite"),
        returned=document.get("returned", "default"),
        uniqueness=document.get("uniqueness", "none"),
        canonical_values=list(document.get("canonicalValues", []) or []),
    )

    for child in document.get("subAttributes", []) or []:
        attribute.sub_attributes.append(attribute_from_dict(child))

    return attribute


def schema_from_dict(document: Dict[str, Any]) -> ResourceSchema:
    """
    Convert a parsed SCIM schema document to the internal representation.

    Args:
        document: Parsed schema JSON (keys: id, name, description, attributes)

    Returns:
        ResourceSchema preserving attribute order

    Raises:
        SchemaError: If the document is malformed
    """
    if not isinstance(document, dict):
        raise SchemaError("Schema document must be a JSON object")

    schemas = document.get("schemas", [])
    if isinstance(schemas, str):
        schemas = [schemas]

    schema = ResourceSchema(
        id=document.get("id"),
        name=document.get("name"),
        description=document.get("description"),
        schemas=list(schemas),
    )

    attributes = document.get("attributes", []) or []
    if not isinstance(attributes, list):
        raise SchemaError("Schema 'attributes' must be a list")

    for attribute_doc in attributes:
        schema.add_attribute(attribute_from_dict(attribute_doc))

    return schema
