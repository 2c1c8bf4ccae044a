# src/gof_patterns/exceptions.py
from typing import Any, Optional, List


class PatternException(Exception):
    """Base exception for all pattern-library errors."""
    pass


class ValidationError(PatternException):
    """Raised when an example object is built from invalid input."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class PatternNotFoundError(PatternException):
    """Raised when a requested pattern, prototype or snapshot cannot be found."""
    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateRegistrationError(PatternException):
    """Raised when a name is registered twice in the same table."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' is already registered")
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnsupportedMediaError(ValidationError):
    """Raised when the media adapter is asked for a format it cannot translate."""
    def __init__(self, audio_type: str):
        super().__init__(f"No advanced player for '{audio_type}' format", {"audio_type": audio_type})
        self.audio_type = audio_type


class SingletonViolationError(PatternException):
    """Raised when a singleton class is instantiated directly a second time."""
    def __init__(self, class_name: str):
        super().__init__(f"{class_name} is a singleton, use get_instance()")
        self.class_name = class_name


class ConfigurationError(PatternException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class InvalidStateTransitionError(PatternException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state
