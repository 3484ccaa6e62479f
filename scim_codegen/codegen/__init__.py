"""
SCIM resource class generation.

Generates Java resource classes from SCIM resource schemas.
"""

from typing import Any, Dict, Optional

from .core.config import GeneratorConfig, ConfigManager, load_config
from .core.generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    MissingSchemaNameError,
    UnsupportedAttributeTypeError,
    generate_code,
)
from .core.schema import (
    AttributeType,
    ResourceSchema,
    SchemaAttribute,
    SchemaError,
    schema_from_dict,
)
from .languages.java import JavaResourceGenerator, create_java_generator
from .registry import InvalidSchemaError, RegistryError, SchemaRegistry, get_registry


def generate_class_from_schema(
    schema: ResourceSchema, config: Optional[GeneratorConfig] = None
) -> str:
    """
    Generate the Java class for a resource schema.

    Args:
        schema: Resource schema to generate from
        config: Generator configuration (defaults when omitted)

    Returns:
        Generated Java source

    Raises:
        GeneratorError: If the schema cannot be generated
    """
    return create_java_generator(config).generate_class_from_schema(schema)


def generate_from_document(
    document: Dict[str, Any],
    config: Optional[GeneratorConfig] = None,
    registry: Optional[SchemaRegistry] = None,
    validate: bool = True,
) -> GenerationResult:
    """
    Generate code from a parsed schema document.

    Args:
        document: Parsed SCIM schema JSON
        config: Generator configuration
        registry: Registry the document is registered in (global one by default)
        validate: Validate against the meta schema before generating

    Returns:
        GenerationResult with generated code

    Raises:
        InvalidSchemaError: If validation rejects the document
        SchemaError: If the document cannot be converted without validation
    """
    if validate:
        schema = (registry or get_registry()).register_resource_schema(document)
    else:
        schema = schema_from_dict(document)

    return generate_code(create_java_generator(config), schema)


__all__ = [
    "AttributeType",
    "CodeGenerator",
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "InvalidSchemaError",
    "JavaResourceGenerator",
    "MissingSchemaNameError",
    "RegistryError",
    "ResourceSchema",
    "SchemaAttribute",
    "SchemaError",
    "SchemaRegistry",
    "UnsupportedAttributeTypeError",
    "generate_class_from_schema",
    "generate_code",
    "generate_from_document",
    "get_registry",
    "load_config",
    "schema_from_dict",
]
