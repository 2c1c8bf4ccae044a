"""Prototype - hand out copies of pre-built objects instead of constructing new ones."""

import copy
from abc import ABC, abstractmethod
from typing import Dict, Optional

from gof_patterns.exceptions import PatternNotFoundError
from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Shape(ABC):
    """Prototype base; clone() returns a deep copy with its own identity."""

    type: str = ""

    def __init__(self, shape_id: Optional[str] = None):
        self.id = shape_id

    @abstractmethod
    def draw(self) -> str:
        pass

    def clone(self) -> 'Shape':
        return copy.deepcopy(self)


class Rectangle(Shape):
    type = "Rectangle"

    def draw(self) -> str:
        return "Inside Rectangle::draw() method."


class Square(Shape):
    type = "Square"

    def draw(self) -> str:
        return "Inside Square::draw() method."


class Circle(Shape):
    type = "Circle"

    def draw(self) -> str:
        return "Inside Circle::draw() method."


class ShapeCache:
    def __init__(self):
        self._shapes: Dict[str, Shape] = {}

    def load_cache(self) -> None:
        """Seed the cache with one prototype per shape."""
        for shape in (Circle("1"), Square("2"), Rectangle("3")):
            self._shapes[shape.id] = shape
        logger.debug("Prototype cache loaded", size=len(self._shapes))

    def add(self, shape: Shape) -> None:
        self._shapes[shape.id] = shape

    def get_shape(self, shape_id: str) -> Shape:
        cached = self._shapes.get(shape_id)
        if cached is None:
            raise PatternNotFoundError("Shape prototype", shape_id)
        return cached.clone()


def demo():
    cache = ShapeCache()
    cache.load_cache()
    return [f"Shape : {cache.get_shape(shape_id).type}" for shape_id in ("1", "2", "3")]
