"""Decorator - wrap a component to add cost and description, one layer at a time."""

from abc import ABC, abstractmethod


class Beverage(ABC):
    """Component interface."""

    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class SimpleCoffee(Beverage):
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "Simple coffee"


class BeverageDecorator(Beverage):
    """
    Base wrapper.

    Subclasses set ``increment`` and ``fragment``; each layer adds its
    increment to the wrapped cost and appends its fragment to the wrapped
    description, so the result follows wrap order.
    """

    increment: float = 0.0
    fragment: str = ""

    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    def cost(self) -> float:
        return self._beverage.cost() + self.increment

    def description(self) -> str:
        return self._beverage.description() + self.fragment


class Milk(BeverageDecorator):
    increment = 0.5
    fragment = ", milk"


class Sugar(BeverageDecorator):
    increment = 0.2
    fragment = ", sugar"


class WhippedCream(BeverageDecorator):
    increment = 0.7
    fragment = ", whipped cream"


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def draw(self) -> str:
        return "Shape: Circle"


class Rectangle(Shape):
    def draw(self) -> str:
        return "Shape: Rectangle"


class ShapeDecorator(Shape):
    def __init__(self, decorated_shape: Shape):
        self._decorated_shape = decorated_shape

    def draw(self) -> str:
        return self._decorated_shape.draw()


class RedShapeDecorator(ShapeDecorator):
    def draw(self) -> str:
        return f"{self._decorated_shape.draw()}\nBorder Color: Red"


def demo():
    coffee = WhippedCream(Sugar(Milk(SimpleCoffee())))
    lines = [
        f"{coffee.description()} costs {coffee.cost():.2f}",
        Circle().draw(),
    ]
    lines.extend(RedShapeDecorator(Circle()).draw().splitlines())
    lines.extend(RedShapeDecorator(Rectangle()).draw().splitlines())
    return lines
