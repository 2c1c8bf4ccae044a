"""Tests for the bridge pattern."""
from unittest.mock import Mock

from gof_patterns.structural.bridge import Circle, DrawAPI, GreenCircle, RedCircle, demo


def test_circle_delegates_to_draw_api():
    draw_api = Mock(spec=DrawAPI)
    draw_api.draw_circle.return_value = "drawn"

    assert Circle(1, 2, 3, draw_api).draw() == "drawn"
    draw_api.draw_circle.assert_called_once_with(3, 1, 2)


def test_same_abstraction_different_implementations():
    red = Circle(100, 100, 10, RedCircle()).draw()
    green = Circle(100, 100, 10, GreenCircle()).draw()

    assert red == "Drawing Circle[ color: red, radius: 10, x: 100, 100]"
    assert green == "Drawing Circle[ color: green, radius: 10, x: 100, 100]"


def test_demo():
    assert len(demo()) == 2
