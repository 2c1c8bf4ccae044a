"""Builder - assemble a Meal from simple items, step by step."""

from abc import ABC, abstractmethod
from typing import List

from gof_patterns.exceptions import ValidationError


class Packing(ABC):
    @abstractmethod
    def pack(self) -> str:
        pass


class Wrapper(Packing):
    def pack(self) -> str:
        return "Wrapper"


class Bottle(Packing):
    def pack(self) -> str:
        return "Bottle"


class Item(ABC):
    """A menu item with a name, a price and the packing it ships in."""

    name: str = ""
    price: float = 0.0

    @abstractmethod
    def packing(self) -> Packing:
        pass


class Burger(Item):
    def packing(self) -> Packing:
        return Wrapper()


class ColdDrink(Item):
    def packing(self) -> Packing:
        return Bottle()


class VegBurger(Burger):
    name = "Veg Burger"
    price = 25.0


class ChickenBurger(Burger):
    name = "Chicken Burger"
    price = 50.5


class Coke(ColdDrink):
    name = "Coke"
    price = 30.0


class Pepsi(ColdDrink):
    name = "Pepsi"
    price = 35.0


class Meal:
    def __init__(self):
        self._items: List[Item] = []

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def get_cost(self) -> float:
        return sum(item.price for item in self._items)

    def show_items(self) -> List[str]:
        return [
            f"Item : {item.name}, Packing : {item.packing().pack()}, Price : {item.price}"
            for item in self._items
        ]


class MealBuilder:
    """
    Builds meals either from a fixed recipe or through staged calls.

    Staged form:
        meal = MealBuilder().with_item(VegBurger()).with_item(Coke()).build()

    build() hands over the collected items and leaves the builder empty,
    so one builder can produce several independent meals.
    """

    def __init__(self):
        self._pending: List[Item] = []

    def with_item(self, item: Item) -> 'MealBuilder':
        self._pending.append(item)
        return self

    def build(self) -> Meal:
        if not self._pending:
            raise ValidationError("Cannot build a meal without items")
        meal = Meal()
        for item in self._pending:
            meal.add_item(item)
        self._pending = []
        return meal

    def prepare_veg_meal(self) -> Meal:
        return MealBuilder().with_item(VegBurger()).with_item(Coke()).build()

    def prepare_non_veg_meal(self) -> Meal:
        return MealBuilder().with_item(ChickenBurger()).with_item(Pepsi()).build()


def demo():
    builder = MealBuilder()
    lines: List[str] = []
    for title, meal in (
        ("Veg Meal", builder.prepare_veg_meal()),
        ("Non-Veg Meal", builder.prepare_non_veg_meal()),
    ):
        lines.append(title)
        lines.extend(meal.show_items())
        lines.append(f"Total Cost: {meal.get_cost()}")
    return lines
