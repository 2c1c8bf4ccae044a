"""Configuration schemas package."""

from .app_schema import AppConfig, OutputConfig, validate_config
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "validate_config",
]
