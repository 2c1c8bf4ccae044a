"""Bridge - decouple the Circle abstraction from how it gets drawn."""

from abc import ABC, abstractmethod


class DrawAPI(ABC):
    """Implementor side of the bridge."""

    @abstractmethod
    def draw_circle(self, radius: int, x: int, y: int) -> str:
        pass


class RedCircle(DrawAPI):
    def draw_circle(self, radius: int, x: int, y: int) -> str:
        return f"Drawing Circle[ color: red, radius: {radius}, x: {x}, {y}]"


class GreenCircle(DrawAPI):
    def draw_circle(self, radius: int, x: int, y: int) -> str:
        return f"Drawing Circle[ color: green, radius: {radius}, x: {x}, {y}]"


class Shape(ABC):
    """Abstraction side of the bridge."""

    def __init__(self, draw_api: DrawAPI):
        self.draw_api = draw_api

    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def __init__(self, x: int, y: int, radius: int, draw_api: DrawAPI):
        super().__init__(draw_api)
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> str:
        return self.draw_api.draw_circle(self.radius, self.x, self.y)


def demo():
    return [
        Circle(100, 100, 10, RedCircle()).draw(),
        Circle(100, 100, 10, GreenCircle()).draw(),
    ]
