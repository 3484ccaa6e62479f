"""
Schema registry for resource schemas.

Holds meta schemas and resource schemas by id. A resource schema is only
accepted after its document validates against the meta schema it declares.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from .core.schema import (
    AttributeType,
    ResourceSchema,
    SchemaAttribute,
    SchemaError,
    schema_from_dict,
)

logger = get_logger(__name__)

META_SCHEMA_ID = "urn:ietf:params:scim:schemas:core:2.0:Schema"
META_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "resources" / "meta_schema.json"


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class InvalidSchemaError(RegistryError):
    """Raised when a schema document is rejected."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or []
        self.summary = message
        if self.problems:
            message = f"{message}: " + "; ".join(self.problems)
        super().__init__(message)


def _matches_type(value: Any, attribute_type: AttributeType) -> bool:
    """Check a single JSON value against an attribute type."""
    if attribute_type == AttributeType.ANY:
        return True
    if attribute_type == AttributeType.BOOLEAN:
        return isinstance(value, bool)
    if attribute_type == AttributeType.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if attribute_type == AttributeType.DECIMAL:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if attribute_type == AttributeType.COMPLEX:
        return isinstance(value, dict)
    # string, reference, dateTime and binary travel as JSON strings
    return isinstance(value, str)


def validate_document(meta_schema: ResourceSchema, document: Dict[str, Any]) -> List[str]:
    """
    Validate a JSON document against a meta schema.

    Args:
        meta_schema: Schema describing what the document must look like
        document: Parsed JSON document

    Returns:
        List of problems (empty if the document is valid)
    """
    problems: List[str] = []

    def check_value(attribute: SchemaAttribute, value: Any, path: str):
        if not _matches_type(value, attribute.type):
            problems.append(
                f"'{path}' must be of type '{attribute.type.value}', "
                f"got {type(value).__name__}"
            )
            return

        if attribute.canonical_values and isinstance(value, str):
            allowed = attribute.canonical_values
            if attribute.case_exact:
                known = value in allowed
            else:
                known = value.lower() in {v.lower() for v in allowed}
            if not known:
                problems.append(
                    f"'{path}' has value '{value}', expected one of {allowed}"
                )

        if attribute.is_complex and attribute.sub_attributes:
            check_object(attribute.sub_attributes, value, path)

    def check_object(attributes: List[SchemaAttribute], node: Dict[str, Any], path: str):
        for attribute in attributes:
            qualified = f"{path}.{attribute.name}" if path else attribute.name
            value = node.get(attribute.name)

            if value is None:
                if attribute.required:
                    problems.append(f"Required attribute '{qualified}' is missing")
                continue

            if attribute.multi_valued:
                if not isinstance(value, list):
                    problems.append(f"'{qualified}' must be a list")
                    continue
                for index, item in enumerate(value):
                    check_value(attribute, item, f"{qualified}[{index}]")
            else:
                check_value(attribute, value, qualified)

    if not isinstance(document, dict):
        return ["Schema document must be a JSON object"]

    check_object(meta_schema.attributes, document, "")
    return problems


class SchemaRegistry:
    """Registry of meta schemas and resource schemas."""

    def __init__(self, load_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            load_defaults: Register the bundled SCIM core meta schema
        """
        self._meta_schemas: Dict[str, ResourceSchema] = {}
        self._resource_schemas: Dict[str, ResourceSchema] = {}
        if load_defaults:
            self._load_default_meta_schemas()

    def _load_default_meta_schemas(self):
        with open(META_SCHEMA_PATH, "r", encoding="utf-8") as f:
            self.register_meta_schema(json.load(f))

    def register_meta_schema(self, document: Dict[str, Any]) -> ResourceSchema:
        """
        Register a meta schema.

        Args:
            document: Parsed meta schema JSON

        Returns:
            The registered schema

        Raises:
            InvalidSchemaError: If the document cannot be converted or has no id
        """
        try:
            schema = schema_from_dict(document)
        except SchemaError as e:
            raise InvalidSchemaError(f"Invalid meta schema: {e}") from e

        if not schema.id:
            raise InvalidSchemaError("Meta schema has no 'id'")

        self._meta_schemas[schema.id] = schema
        logger.info("Registered meta schema %s", schema.id)
        return schema

    def register_resource_schema(self, document: Dict[str, Any]) -> ResourceSchema:
        """
        Validate and register a resource schema.

        The document must declare exactly one meta schema in its 'schemas'
        attribute, and that meta schema must already be registered.

        Args:
            document: Parsed resource schema JSON

        Returns:
            The registered schema

        Raises:
            InvalidSchemaError: If the document is rejected
        """
        if not isinstance(document, dict):
            raise InvalidSchemaError("Schema document must be a JSON object")

        schemas = document.get("schemas")
        if not isinstance(schemas, list) or len(schemas) != 1:
            logger.warning("Rejected schema document with schemas=%r", schemas)
            raise InvalidSchemaError(
                "unexpected number of entries in 'schemas' attribute. "
                f"Expected one entry but was: '{schemas}'"
            )

        meta_schema = self.get_meta_schema(schemas[0])
        if meta_schema is None:
            raise InvalidSchemaError(
                f"meta schema with URI '{schemas[0]}' is not registered"
            )

        problems = validate_document(meta_schema, document)
        if problems:
            logger.warning(
                "Schema %r failed validation with %d problem(s)",
                document.get("id"),
                len(problems),
            )
            raise InvalidSchemaError(
                f"Schema '{document.get('id')}' does not match meta schema "
                f"'{meta_schema.id}'",
                problems,
            )

        try:
            schema = schema_from_dict(document)
        except SchemaError as e:
            raise InvalidSchemaError(str(e)) from e

        self._resource_schemas[schema.id] = schema
        logger.info("Registered resource schema %s (%s)", schema.id, schema.name)
        return schema

    def get_meta_schema(self, schema_id: str) -> Optional[ResourceSchema]:
        """Get a meta schema by id, None if it is not registered."""
        return self._meta_schemas.get(schema_id)

    def get_resource_schema(self, schema_id: str) -> Optional[ResourceSchema]:
        """Get a resource schema by id, None if it is not registered."""
        return self._resource_schemas.get(schema_id)

    def list_resource_schemas(self) -> List[str]:
        """Get ids of all registered resource schemas."""
        return sorted(self._resource_schemas.keys())


# Global registry instance - created once
_global_registry: Optional[SchemaRegistry] = None


def get_registry() -> SchemaRegistry:
    """Get the global schema registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = SchemaRegistry()
    return _global_registry
