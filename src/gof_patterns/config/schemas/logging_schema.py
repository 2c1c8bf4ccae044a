"""Logging configuration schema."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gof_patterns.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: str = Field("logs/gof-patterns.log", description="Log file path for file destination")
    max_size_mb: int = Field(10, description="Rotate the log file after this size")
    backup_count: int = Field(5, description="Rotated files to keep")
    json_format: bool = Field(False, description="Render records as JSON instead of console text")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = v.upper()
        valid_levels = [lvl.value for lvl in LogLevel]
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Rotation settings must be at least 1")
        return v
