"""Unified configuration management for the pattern library."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from gof_patterns.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from gof_patterns.config.schemas import AppConfig, LoggingConfig, OutputConfig
from gof_patterns.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is assembled lazily from three layers, later layers winning:
    - the built-in defaults
    - an optional YAML or JSON file
    - GOF_* environment variables
    The merged dictionary is validated into an AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            file_data = self.load_from_file(self._config_file)
            config_data = self._deep_merge(config_data, file_data)

        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig(**config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Load a configuration file, choosing the parser by extension."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yaml", ".yml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration from %s", path)
        return data

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply GOF_* environment variables on top of a config dictionary."""
        for env_var, dotted_path in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None or value == "":
                continue
            target = config
            *parents, leaf = dotted_path.split(".")
            for key in parents:
                target = target.setdefault(key, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(
                        f"Section '{key}' must be a mapping", missing_fields=[key]
                    )
            target[leaf] = value
            logger.debug("Applied override %s -> %s", env_var, dotted_path)
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        type_mapping = {
            AppConfig: lambda: self.app_config,
            LoggingConfig: lambda: self.app_config.logging,
            OutputConfig: lambda: self.app_config.output,
        }
        if config_type not in type_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type]()

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = ConfigurationManager._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Return the process-wide manager, replacing it when a new file is given."""
    global _config_manager
    with _manager_lock:
        if _config_manager is None or config_file is not None:
            _config_manager = ConfigurationManager(config_file)
        return _config_manager
