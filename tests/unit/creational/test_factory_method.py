"""Tests for the factory method pattern."""
import pytest

from gof_patterns.creational.factory_method import Circle, Rectangle, Shape, ShapeFactory, Square
from gof_patterns.exceptions import DuplicateRegistrationError


class Triangle(Shape):
    def draw(self) -> str:
        return "Inside Triangle::draw() method."


class TestShapeFactory:
    """Test label dispatch."""

    def setup_method(self):
        self.factory = ShapeFactory()

    @pytest.mark.parametrize(
        "label, expected",
        [("circle", Circle), ("RECTANGLE", Rectangle), ("Square", Square)],
    )
    def test_known_labels_case_insensitive(self, label, expected):
        assert isinstance(self.factory.get_shape(label), expected)

    @pytest.mark.parametrize("label", ["hexagon", "", None])
    def test_unrecognized_label_returns_none(self, label):
        assert self.factory.get_shape(label) is None

    def test_each_call_builds_new_product(self):
        assert self.factory.get_shape("circle") is not self.factory.get_shape("circle")

    def test_register_new_product(self):
        self.factory.register("Triangle", Triangle)

        assert self.factory.get_shape("triangle").draw() == "Inside Triangle::draw() method."

    def test_register_duplicate_label_raises(self):
        with pytest.raises(DuplicateRegistrationError):
            self.factory.register("circle", Triangle)

    def test_draw_messages(self):
        assert self.factory.get_shape("circle").draw() == "Inside Circle::draw() method."
