"""
Core code generation components.

Provides the schema model, naming helpers, templates, configuration and the
base generator contract.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    MissingSchemaNameError,
    UnsupportedAttributeTypeError,
    generate_code,
)
from .schema import (
    AttributeType,
    ResourceSchema,
    SchemaAttribute,
    SchemaError,
    attribute_from_dict,
    schema_from_dict,
)
from .naming import JavaNameSanitizer, capitalize, class_name_for
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "MissingSchemaNameError",
    "UnsupportedAttributeTypeError",
    "generate_code",
    # Schema model
    "AttributeType",
    "ResourceSchema",
    "SchemaAttribute",
    "SchemaError",
    "attribute_from_dict",
    "schema_from_dict",
    # Naming utilities
    "JavaNameSanitizer",
    "capitalize",
    "class_name_for",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
