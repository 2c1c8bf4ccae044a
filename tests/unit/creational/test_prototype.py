"""Tests for the prototype pattern."""
import pytest

from gof_patterns.creational.prototype import Circle, ShapeCache, demo
from gof_patterns.exceptions import PatternNotFoundError


class TestShapeCache:
    """Test prototype cloning."""

    def setup_method(self):
        self.cache = ShapeCache()
        self.cache.load_cache()

    @pytest.mark.parametrize("shape_id, shape_type", [("1", "Circle"), ("2", "Square"), ("3", "Rectangle")])
    def test_seeded_prototypes(self, shape_id, shape_type):
        shape = self.cache.get_shape(shape_id)

        assert shape.type == shape_type
        assert shape.id == shape_id

    def test_get_shape_returns_distinct_clones(self):
        first = self.cache.get_shape("1")
        second = self.cache.get_shape("1")

        assert first is not second

    def test_mutating_clone_leaves_prototype_untouched(self):
        clone = self.cache.get_shape("1")
        clone.id = "changed"

        assert self.cache.get_shape("1").id == "1"

    def test_unknown_id_raises(self):
        with pytest.raises(PatternNotFoundError, match="Shape prototype with ID 99 not found"):
            self.cache.get_shape("99")

    def test_add_custom_prototype(self):
        self.cache.add(Circle("big"))

        assert self.cache.get_shape("big").draw() == "Inside Circle::draw() method."


def test_demo():
    assert demo() == ["Shape : Circle", "Shape : Square", "Shape : Rectangle"]
