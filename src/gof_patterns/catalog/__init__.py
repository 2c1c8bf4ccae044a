"""Pattern catalog - the index of all patterns and their demonstrations."""

from .models import DemoResult, PatternCategory, PatternInfo
from .registry import PatternRegistry, get_registry

__all__ = [
    "DemoResult",
    "PatternCategory",
    "PatternInfo",
    "PatternRegistry",
    "get_registry",
]
