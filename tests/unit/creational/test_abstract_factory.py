"""Tests for the abstract factory pattern."""
import pytest

from gof_patterns.creational.abstract_factory import (
    Blue,
    Circle,
    ColorFactory,
    FactoryProducer,
    Red,
    ShapeFactory,
    Square,
    demo,
)


def test_producer_selects_family():
    assert isinstance(FactoryProducer.get_factory("shape"), ShapeFactory)
    assert isinstance(FactoryProducer.get_factory("COLOR"), ColorFactory)


@pytest.mark.parametrize("choice", ["texture", "", None])
def test_producer_unknown_family_returns_none(choice):
    assert FactoryProducer.get_factory(choice) is None


def test_shape_family_only_builds_shapes():
    factory = FactoryProducer.get_factory("shape")

    assert isinstance(factory.get_shape("circle"), Circle)
    assert isinstance(factory.get_shape("SQUARE"), Square)
    assert factory.get_color("red") is None


def test_color_family_only_builds_colors():
    factory = FactoryProducer.get_factory("color")

    assert isinstance(factory.get_color("red"), Red)
    assert isinstance(factory.get_color("Blue"), Blue)
    assert factory.get_shape("circle") is None
    assert factory.get_color("purple") is None


def test_demo_covers_both_families():
    lines = demo()

    assert len(lines) == 6
    assert lines[0] == "Inside Circle::draw() method."
    assert lines[-1] == "Inside Blue::fill() method."
