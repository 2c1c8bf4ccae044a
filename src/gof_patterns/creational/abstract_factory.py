"""Abstract Factory - choose a whole family of products at once."""

from abc import ABC, abstractmethod
from typing import Optional


class Shape(ABC):
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


class Color(ABC):
    @abstractmethod
    def fill(self) -> str:
        pass


class Red(Color):
    def fill(self) -> str:
        return "Inside Red::fill() method."


class Green(Color):
    def fill(self) -> str:
        return "Inside Green::fill() method."


class Blue(Color):
    def fill(self) -> str:
        return "Inside Blue::fill() method."


class AbstractFactory(ABC):
    """Family interface; each family answers None for products it does not own."""

    @abstractmethod
    def get_shape(self, shape_type: Optional[str]) -> Optional[Shape]:
        pass

    @abstractmethod
    def get_color(self, color: Optional[str]) -> Optional[Color]:
        pass


class ShapeFactory(AbstractFactory):
    _shapes = {"circle": Circle, "rectangle": Rectangle, "square": Square}

    def get_shape(self, shape_type: Optional[str]) -> Optional[Shape]:
        product = self._shapes.get((shape_type or "").lower())
        return product() if product else None

    def get_color(self, color: Optional[str]) -> Optional[Color]:
        return None


class ColorFactory(AbstractFactory):
    _colors = {"red": Red, "green": Green, "blue": Blue}

    def get_shape(self, shape_type: Optional[str]) -> Optional[Shape]:
        return None

    def get_color(self, color: Optional[str]) -> Optional[Color]:
        product = self._colors.get((color or "").lower())
        return product() if product else None


class FactoryProducer:
    @staticmethod
    def get_factory(choice: Optional[str]) -> Optional[AbstractFactory]:
        """Return the factory for a family name ("shape" or "color")."""
        families = {"shape": ShapeFactory, "color": ColorFactory}
        family = families.get((choice or "").lower())
        return family() if family else None


def demo():
    shapes = FactoryProducer.get_factory("SHAPE")
    colors = FactoryProducer.get_factory("COLOR")
    lines = [shapes.get_shape(label).draw() for label in ("CIRCLE", "RECTANGLE", "SQUARE")]
    lines.extend(colors.get_color(label).fill() for label in ("RED", "GREEN", "BLUE"))
    return lines
