"""Pattern Registry - registry of runnable pattern demonstrations.

The CLI and tests look patterns up by name here instead of importing the
pattern modules directly, so adding a pattern means adding one catalog entry.
"""

import threading
from typing import Dict, Iterable, List, Optional

from gof_patterns.catalog.models import DemoResult, PatternCategory, PatternInfo
from gof_patterns.exceptions import DuplicateRegistrationError, PatternNotFoundError
from gof_patterns.infrastructure.logging import get_logger


class PatternRegistry:
    """
    Registry of catalog entries keyed by pattern name.

    Thread-safe singleton implementation. Registration order is kept and is
    the order used when listing.
    """

    _instance: Optional['PatternRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternInfo] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'PatternRegistry':
        """Get singleton instance of pattern registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    def register_pattern(self, info: PatternInfo) -> None:
        """
        Register a pattern.

        Args:
            info: Catalog entry to register

        Raises:
            DuplicateRegistrationError: If a pattern with the same name is already registered
        """
        with self._registration_lock:
            if info.name in self._registrations:
                raise DuplicateRegistrationError("Pattern", info.name)
            self._registrations[info.name] = info
            self._logger.debug("Registered pattern", pattern=info.name, category=info.category.value)

    def register_all(self, infos: Iterable[PatternInfo]) -> None:
        for info in infos:
            self.register_pattern(info)

    def unregister_pattern(self, name: str) -> bool:
        """
        Unregister a pattern.

        Returns:
            True if pattern was unregistered, False if not found
        """
        with self._registration_lock:
            if name in self._registrations:
                del self._registrations[name]
                return True
            return False

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registered_patterns(self) -> List[str]:
        """Get list of all registered pattern names, in registration order."""
        return list(self._registrations.keys())

    def get_pattern(self, name: str) -> PatternInfo:
        """
        Look a pattern up by name.

        Raises:
            PatternNotFoundError: If no pattern with that name is registered
        """
        info = self._registrations.get(name)
        if info is None:
            raise PatternNotFoundError("Pattern", name)
        return info

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternInfo]:
        """List registered patterns, optionally filtered by category."""
        return [
            info for info in self._registrations.values()
            if category is None or info.category == category
        ]

    def run_demo(self, name: str) -> DemoResult:
        """Run one pattern's demonstration and collect its output lines."""
        info = self.get_pattern(name)
        self._logger.debug("Running demonstration", pattern=name)
        return DemoResult(pattern=info.name, category=info.category, output=list(info.demo()))

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registration_lock:
            self._registrations.clear()


def get_registry() -> PatternRegistry:
    """Return the singleton registry, populated with the default catalog on first use."""
    registry = PatternRegistry.get_instance()
    with registry._registration_lock:
        if not registry.get_registered_patterns():
            from gof_patterns.catalog.catalog import PATTERN_CATALOG

            registry.register_all(PATTERN_CATALOG)
    return registry
