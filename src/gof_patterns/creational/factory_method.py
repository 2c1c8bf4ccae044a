"""Factory Method - pick a concrete product by label."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from gof_patterns.exceptions import DuplicateRegistrationError
from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Shape(ABC):
    """Product interface."""

    @abstractmethod
    def draw(self) -> str:
        pass


class Rectangle(Shape):
    def draw(self) -> str:
        return "Inside Rectangle::draw() method."


class Square(Shape):
    def draw(self) -> str:
        return "Inside Square::draw() method."


class Circle(Shape):
    def draw(self) -> str:
        return "Inside Circle::draw() method."


class ShapeFactory:
    """
    Creates shapes from a case-insensitive label.

    Unknown labels yield None rather than raising, so callers can check
    the factory for support.
    """

    def __init__(self):
        self._products: Dict[str, Type[Shape]] = {
            "circle": Circle,
            "rectangle": Rectangle,
            "square": Square,
        }

    def register(self, label: str, product: Type[Shape]) -> None:
        """Add a new product label."""
        key = label.lower()
        if key in self._products:
            raise DuplicateRegistrationError("Shape", key)
        self._products[key] = product

    def get_shape(self, shape_type: Optional[str]) -> Optional[Shape]:
        if not shape_type:
            return None
        product = self._products.get(shape_type.lower())
        if product is None:
            logger.debug("Unrecognized shape label", label=shape_type)
            return None
        return product()


def demo():
    factory = ShapeFactory()
    return [factory.get_shape(label).draw() for label in ("CIRCLE", "RECTANGLE", "SQUARE")]
