"""Singleton - a class that hands out exactly one shared instance."""

import threading
from typing import Optional

from gof_patterns.exceptions import SingletonViolationError
from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SingleObject:
    """
    Thread-safe lazily created singleton.

    Callers go through get_instance(); constructing the class directly once an
    instance exists raises SingletonViolationError.
    """

    _instance: Optional['SingleObject'] = None
    _lock = threading.RLock()

    def __init__(self):
        if type(self)._instance is not None:
            raise SingletonViolationError(type(self).__name__)

    @classmethod
    def get_instance(cls) -> 'SingleObject':
        """Get singleton instance, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created singleton instance", singleton=cls.__name__)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next get_instance() builds a new one."""
        with cls._lock:
            cls._instance = None

    def show_message(self) -> str:
        return "Hello World!"


def demo():
    first = SingleObject.get_instance()
    second = SingleObject.get_instance()
    return [
        first.show_message(),
        f"Same instance: {first is second}",
    ]
