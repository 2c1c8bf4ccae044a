"""Tests for the iterator pattern."""
import pytest

from gof_patterns.behavioral.iterator import NameRepository, demo


def test_explicit_cursor():
    iterator = NameRepository(["a", "b"]).get_iterator()

    assert iterator.has_next()
    assert iterator.next() == "a"
    assert iterator.next() == "b"
    assert not iterator.has_next()


def test_next_past_end_raises_stop_iteration():
    iterator = NameRepository([]).get_iterator()

    with pytest.raises(StopIteration):
        iterator.next()


def test_python_iteration_protocol():
    assert list(NameRepository()) == ["Robert", "John", "Julie", "Lora"]


def test_independent_iterators():
    repository = NameRepository(["x", "y"])
    first = repository.get_iterator()
    first.next()

    assert list(repository.get_iterator()) == ["x", "y"]


def test_demo():
    assert demo() == ["Name : Robert", "Name : John", "Name : Julie", "Name : Lora"]
