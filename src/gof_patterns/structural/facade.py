"""Facade - one ShapeMaker in front of several shape classes."""

from abc import ABC, abstractmethod
from typing import List


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass


class Rectangle(Shape):
    def draw(self) -> str:
        return "Rectangle::draw()"


class Square(Shape):
    def draw(self) -> str:
        return "Square::draw()"


class Circle(Shape):
    def draw(self) -> str:
        return "Circle::draw()"


class ShapeMaker:
    def __init__(self):
        self._circle = Circle()
        self._rectangle = Rectangle()
        self._square = Square()

    def draw_circle(self) -> str:
        return self._circle.draw()

    def draw_rectangle(self) -> str:
        return self._rectangle.draw()

    def draw_square(self) -> str:
        return self._square.draw()

    def draw_all(self) -> List[str]:
        return [self.draw_circle(), self.draw_rectangle(), self.draw_square()]


def demo():
    return ShapeMaker().draw_all()
