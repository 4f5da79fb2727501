"""
Configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any
import jsonschema
import logging

from chemnet.config.network_config import (
    DeviceConfig,
    NetworkConfig,
    SimulationConfig,
    StreamConfig,
)
from chemnet.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "network_schema_v1.json"


class ConfigLoader:
    """
    Configuration loader with schema validation.

    Example:
        loader = ConfigLoader()
        config = loader.load_yaml("configs/reactor_split.yaml")
    """

    def __init__(self, schema_path: Path = None):
        """
        Initialize configuration loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        self.schema_path = Path(schema_path) if schema_path is not None else DEFAULT_SCHEMA_PATH
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load schema from {self.schema_path}: {e}") from e

    def load_yaml(self, config_path: Path | str) -> NetworkConfig:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

        return self.dict_to_config(config_dict)

    def load_json(self, config_path: Path | str) -> NetworkConfig:
        """
        Load configuration from JSON file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

        return self.dict_to_config(config_dict)

    def dict_to_config(self, config_dict: Dict[str, Any]) -> NetworkConfig:
        """
        Convert dictionary to NetworkConfig with validation.

        Args:
            config_dict: Configuration dictionary from YAML/JSON

        Raises:
            ConfigurationError: If schema or dataclass validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration root must be a mapping")

        try:
            jsonschema.validate(instance=config_dict, schema=self.schema)
            logger.debug("JSON schema validation passed")
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        config = self._build_network_config(config_dict)

        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.info(f"Loaded configuration: {config.name} v{config.version}")
        return config

    def _build_network_config(self, d: Dict[str, Any]) -> NetworkConfig:
        """Build NetworkConfig from a schema-valid dictionary."""
        streams = [StreamConfig(**s) for s in d.get('streams', [])]
        devices = [
            DeviceConfig(
                id=dev['id'],
                type=dev['type'],
                params=dict(dev.get('params', {})),
                inputs=list(dev.get('inputs', [])),
                outputs=list(dev.get('outputs', [])),
            )
            for dev in d.get('devices', [])
        ]
        simulation = SimulationConfig(**d.get('simulation', {}))

        return NetworkConfig(
            name=d.get('name', "Process Network"),
            version=str(d.get('version', "1.0")),
            streams=streams,
            devices=devices,
            simulation=simulation,
        )


def load_network_config(config_path: Path | str) -> NetworkConfig:
    """
    Convenience function to load network configuration.

    Automatically detects YAML or JSON based on file extension.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Validated NetworkConfig instance
    """
    loader = ConfigLoader()
    config_path = Path(config_path)

    if config_path.suffix in ['.yaml', '.yml']:
        return loader.load_yaml(config_path)
    elif config_path.suffix == '.json':
        return loader.load_json(config_path)
    else:
        raise ConfigurationError(f"Unsupported file format: {config_path.suffix}")
