import json
import logging
import os
from typing import Any, Dict, Optional

import toml
import yaml
from pydantic import ValidationError

from ...api.exceptions import ConfigurationError
from .schemas import FactoryConfig


class ConfigManager:
    """Handles loading and accessing configuration from TOML, YAML or JSON files."""

    def __init__(
        self,
        config_file_path: Optional[str] = None,
        config_dir: str = "config",
        config_name: str = "typefactory",
    ):
        """
        Initialize ConfigManager.

        Args:
            config_file_path: Direct path to a config file.
            config_dir: Directory containing config files (used if config_file_path is None).
            config_name: Base name of config file (without extension, used if config_file_path is None).
        """
        self.config_file_path = config_file_path
        self.config_dir = config_dir
        self.config_name = config_name
        self.config_data: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _read(file_path: str) -> Dict[str, Any]:
        _, ext = os.path.splitext(file_path)
        with open(file_path, "r", encoding="utf-8") as f:
            if ext == ".toml":
                return toml.load(f)
            if ext in [".yml", ".yaml"]:
                return yaml.safe_load(f) or {}
            if ext == ".json":
                return json.load(f)
        raise ConfigurationError(
            f"Unsupported config file extension: {ext} for file {file_path}"
        )

    def load_config(self) -> None:
        """Load configuration from the specified file path or search in the config directory."""
        if self.config_file_path:
            if not os.path.exists(self.config_file_path):
                raise FileNotFoundError(
                    f"Config file not found: {self.config_file_path}"
                )
            self.config_data = self._read(self.config_file_path)
            self.logger.info(f"Loaded config from {self.config_file_path}")
            return

        candidates = [
            os.path.join(self.config_dir, f"{self.config_name}{ext}")
            for ext in (".toml", ".yml", ".yaml", ".json")
        ]
        for path in candidates:
            if os.path.exists(path):
                self.config_data = self._read(path)
                self.logger.info(f"Loaded config from {path}")
                return

        raise FileNotFoundError(
            f"No config file found. Searched at: {', '.join(candidates)}"
        )

    def get_param(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get configuration parameter by dot notation key.

        Args:
            key: Dot notation key (e.g. 'logging.level')
            default: Default value if key not found

        Returns:
            The configuration value or default if not found
        """
        current: Any = self.config_data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return default
            current = current[k]
        return current

    def to_model(self) -> FactoryConfig:
        """Validate the loaded data into a FactoryConfig.

        Raises:
            ConfigurationError: If the data does not match the schema
        """
        try:
            return FactoryConfig.model_validate(self.config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid typefactory configuration: {e}") from e
