"""Tests for the state pattern."""
import pytest

from gof_patterns.behavioral.state import Context, Light, LightColor, StartState, StopState, demo
from gof_patterns.exceptions import InvalidStateTransitionError


def test_context_starts_without_state():
    assert Context().state is None


def test_states_install_themselves():
    context = Context()
    start = StartState()

    assert start.do_action(context) == "Player is in start state"
    assert context.state is start
    assert str(context.state) == "Start State"

    StopState().do_action(context)
    assert str(context.state) == "Stop State"


class TestLight:
    def test_cycle(self):
        light = Light()

        assert [light.next() for _ in range(4)] == [
            LightColor.YELLOW,
            LightColor.RED,
            LightColor.GREEN,
            LightColor.YELLOW,
        ]

    def test_valid_transition_sets_message(self):
        light = Light(LightColor.RED)
        light.transition_to(LightColor.GREEN)

        assert light.color == LightColor.GREEN
        assert light.message == "Go"

    def test_unknown_color_raises(self):
        light = Light(LightColor.GREEN)

        with pytest.raises(InvalidStateTransitionError, match="Cannot transition from green to blue"):
            light.transition_to("blue")
        assert light.color == LightColor.GREEN

    def test_color_given_as_string(self):
        light = Light(LightColor.GREEN)
        light.transition_to("yellow")

        assert light.color == LightColor.YELLOW
        assert light.message == "Slow down"

    def test_invalid_transition_raises(self):
        light = Light(LightColor.GREEN)

        with pytest.raises(InvalidStateTransitionError, match="Cannot transition from green to red"):
            light.transition_to(LightColor.RED)
        assert light.color == LightColor.GREEN

    def test_transition_to_current_color_is_noop(self):
        light = Light(LightColor.YELLOW)
        light.transition_to(LightColor.YELLOW)

        assert light.color == LightColor.YELLOW
        assert light.message == ""


def test_demo():
    lines = demo()

    assert lines[:4] == ["Player is in start state", "Start State", "Player is in stop state", "Stop State"]
    assert lines[-1] == "Light: green (Go)"
