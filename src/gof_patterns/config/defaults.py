# src/gof_patterns/config/defaults.py
from enum import Enum
from typing import Any, Dict


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


# Environment variable -> dotted config path
ENV_OVERRIDES: Dict[str, str] = {
    "GOF_LOG_LEVEL": "logging.level",
    "GOF_LOG_DESTINATION": "logging.destination",
    "GOF_LOG_FILE": "logging.file_path",
    "GOF_OUTPUT_FORMAT": "output.format",
    "GOF_ENVIRONMENT": "environment",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "development",
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "file_path": "logs/gof-patterns.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "json_format": False,
    },
    "output": {
        "format": "table",
    },
}
