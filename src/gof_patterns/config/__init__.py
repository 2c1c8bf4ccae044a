"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, OutputConfig, validate_config
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'OutputConfig',
    'validate_config',
    'ConfigurationManager',
    'get_config_manager',
]
