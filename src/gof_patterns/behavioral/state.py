"""State - behavior follows the object the Context currently holds as its state."""

from enum import Enum
from typing import List, Optional

from gof_patterns.exceptions import InvalidStateTransitionError
from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class State:
    """Each state installs itself into the context when it acts."""

    label: str = ""

    def do_action(self, context: 'Context') -> str:
        context.state = self
        logger.debug("State changed", state=self.label)
        return f"Player is in {self.label.lower()}"

    def __str__(self) -> str:
        return self.label


class StartState(State):
    label = "Start State"


class StopState(State):
    label = "Stop State"


class Context:
    def __init__(self):
        self.state: Optional[State] = None


class LightColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class Light:
    """Traffic light: a tagged state with an explicit transition table."""

    # Define valid transitions with specific messages
    valid_transitions = {
        LightColor.GREEN: {LightColor.YELLOW: "Slow down"},
        LightColor.YELLOW: {LightColor.RED: "Stop"},
        LightColor.RED: {LightColor.GREEN: "Go"},
    }

    def __init__(self, color: LightColor = LightColor.GREEN):
        self.color = color
        self.message = ""

    def transition_to(self, new_color: LightColor) -> None:
        try:
            new_color = LightColor(new_color)
        except ValueError as e:
            raise InvalidStateTransitionError(self.color.value, str(new_color)) from e

        if self.color == new_color:
            return

        if new_color not in self.valid_transitions.get(self.color, {}):
            raise InvalidStateTransitionError(self.color.value, new_color.value)

        old_color = self.color
        self.color = new_color
        self.message = self.valid_transitions[old_color][new_color]
        logger.debug("Light changed", old=old_color.value, new=new_color.value)

    def next(self) -> LightColor:
        """Advance to the single successor of the current color."""
        (successor,) = self.valid_transitions[self.color]
        self.transition_to(successor)
        return self.color


def demo():
    context = Context()
    lines = [StartState().do_action(context), str(context.state)]
    lines.append(StopState().do_action(context))
    lines.append(str(context.state))

    light = Light()
    lines.append(f"Light: {light.color.value}")
    for _ in range(3):
        light.next()
        lines.append(f"Light: {light.color.value} ({light.message})")
    return lines
