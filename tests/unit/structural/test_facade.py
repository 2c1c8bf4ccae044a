"""Tests for the facade pattern."""
from gof_patterns.structural.facade import ShapeMaker


def test_shape_maker_draws_each_shape():
    maker = ShapeMaker()

    assert maker.draw_circle() == "Circle::draw()"
    assert maker.draw_rectangle() == "Rectangle::draw()"
    assert maker.draw_square() == "Square::draw()"


def test_draw_all_order():
    assert ShapeMaker().draw_all() == ["Circle::draw()", "Rectangle::draw()", "Square::draw()"]
