"""Tests for the builder pattern."""
import pytest

from gof_patterns.creational.builder import ChickenBurger, Coke, MealBuilder, Pepsi, VegBurger
from gof_patterns.exceptions import ValidationError


@pytest.fixture
def builder():
    return MealBuilder()


def test_veg_meal(builder):
    meal = builder.prepare_veg_meal()

    assert [type(item) for item in meal.items] == [VegBurger, Coke]
    assert meal.get_cost() == 55.0
    assert meal.show_items() == [
        "Item : Veg Burger, Packing : Wrapper, Price : 25.0",
        "Item : Coke, Packing : Bottle, Price : 30.0",
    ]


def test_non_veg_meal(builder):
    meal = builder.prepare_non_veg_meal()

    assert [type(item) for item in meal.items] == [ChickenBurger, Pepsi]
    assert meal.get_cost() == 85.5


def test_staged_build(builder):
    meal = builder.with_item(ChickenBurger()).with_item(Coke()).with_item(Coke()).build()

    assert meal.get_cost() == 110.5
    assert len(meal.items) == 3


def test_build_resets_builder(builder):
    first = builder.with_item(VegBurger()).build()
    second = builder.with_item(Pepsi()).build()

    assert [item.name for item in first.items] == ["Veg Burger"]
    assert [item.name for item in second.items] == ["Pepsi"]


def test_build_without_items_raises(builder):
    with pytest.raises(ValidationError, match="without items"):
        builder.build()
