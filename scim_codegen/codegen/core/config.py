"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import copy
import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, asdict

from ...logging_config import get_logger
from .schema import AttributeType

logger = get_logger(__name__)

DEFAULT_IMPORTS = [
    "java.util.Arrays",
    "java.util.List",
    "java.util.Optional",
    "java.util.Set",
    "java.time.Instant",
    "de.captaingoldfish.scim.sdk.common.resources.ResourceNode",
    "de.captaingoldfish.scim.sdk.common.resources.base.ScimObjectNode",
]

UNKNOWN_TYPE_POLICIES = {"fallback", "strict"}

# Keys of an object-valued type override
OVERRIDE_KEYS = {"java_type", "read_method"}


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Configuration for the resource class generator."""

    # Output settings
    output_file: Optional[str] = None
    package_name: str = "???"

    # Code style settings
    indent_size: int = 2

    # Class structure
    base_type: str = "ResourceNode"
    nested_base_type: str = "ScimObjectNode"
    imports: List[str] = field(default_factory=lambda: list(DEFAULT_IMPORTS))

    # Additional metadata
    add_comments: bool = True

    # Type handling: 'fallback' treats unsupported attribute types as strings,
    # 'strict' rejects them
    unknown_type_policy: str = "fallback"
    # Attribute type value -> Java type name, or {"java_type", "read_method"}
    type_overrides: Dict[str, Any] = field(default_factory=dict)

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = copy.deepcopy(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in GeneratorConfig.__dataclass_fields__.values()}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys are kept as custom settings
        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        self._check_types(config_args)
        return GeneratorConfig(**config_args)

    def _check_types(self, config_args: Dict[str, Any]):
        """Reject values generation cannot work with."""
        indent_size = config_args.get("indent_size")
        if not isinstance(indent_size, int) or isinstance(indent_size, bool):
            raise ConfigError(
                f"indent_size must be an integer, got {indent_size!r}"
            )
        if indent_size < 0:
            raise ConfigError(f"indent_size must not be negative, got {indent_size}")

        policy = config_args.get("unknown_type_policy")
        if policy not in UNKNOWN_TYPE_POLICIES:
            raise ConfigError(
                f"unknown_type_policy must be one of {sorted(UNKNOWN_TYPE_POLICIES)}, "
                f"got {policy!r}"
            )

        imports = config_args.get("imports")
        if not isinstance(imports, list) or not all(
            isinstance(module, str) for module in imports
        ):
            raise ConfigError(f"imports must be a list of strings, got {imports!r}")

        for key in ("package_name", "base_type", "nested_base_type"):
            if not isinstance(config_args.get(key), str):
                raise ConfigError(f"{key} must be a string, got {config_args.get(key)!r}")

        if not isinstance(config_args.get("add_comments"), bool):
            raise ConfigError(
                f"add_comments must be true or false, got {config_args.get('add_comments')!r}"
            )

        overrides = config_args.get("type_overrides")
        if not isinstance(overrides, dict):
            raise ConfigError(f"type_overrides must be an object, got {overrides!r}")
        for type_name, override in overrides.items():
            if isinstance(override, str):
                continue
            if isinstance(override, dict) and set(override) <= OVERRIDE_KEYS and all(
                isinstance(value, str) for value in override.values()
            ):
                continue
            raise ConfigError(
                f"type_overrides['{type_name}'] must be a Java type name or an "
                f"object with {sorted(OVERRIDE_KEYS)}, got {override!r}"
            )

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.unknown_type_policy not in UNKNOWN_TYPE_POLICIES:
            warnings.append(f"Invalid unknown_type_policy: {config.unknown_type_policy}")

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        known_types = {t.value for t in AttributeType}
        for type_name in config.type_overrides:
            if type_name not in known_types:
                warnings.append(f"Type override for unknown attribute type: {type_name}")

        if AttributeType.COMPLEX.value in config.type_overrides:
            warnings.append("Type override for 'complex' is ignored")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)


EXAMPLE_CONFIG = {
    "package_name": "com.example.scim.resources",
    "indent_size": 4,
    "add_comments": True,
    "unknown_type_policy": "strict",
    "type_overrides": {
        "integer": {"java_type": "Integer", "read_method": "getIntegerAttribute"}
    },
}
