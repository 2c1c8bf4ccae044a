"""Memento - snapshot an Originator's state and restore it later."""

import copy
from typing import Any, List

from pydantic import BaseModel, ConfigDict

from gof_patterns.exceptions import PatternNotFoundError


class Memento(BaseModel):
    """Immutable snapshot."""
    model_config = ConfigDict(frozen=True)

    state: Any


class Originator:
    def __init__(self, state: Any = None):
        self.state = state

    def save_state_to_memento(self) -> Memento:
        # deep copies keep later mutation of a mutable state out of the snapshot
        return Memento(state=copy.deepcopy(self.state))

    def get_state_from_memento(self, memento: Memento) -> None:
        self.state = copy.deepcopy(memento.state)


class CareTaker:
    def __init__(self):
        self._mementos: List[Memento] = []

    def add(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get(self, index: int) -> Memento:
        if not 0 <= index < len(self._mementos):
            raise PatternNotFoundError("Memento", index)
        # copies keep a mutable payload in the stored snapshot untouched
        return self._mementos[index].model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._mementos)


def demo():
    originator = Originator()
    care_taker = CareTaker()

    originator.state = "State #1"
    originator.state = "State #2"
    care_taker.add(originator.save_state_to_memento())

    originator.state = "State #3"
    care_taker.add(originator.save_state_to_memento())

    originator.state = "State #4"
    lines = [f"Current State: {originator.state}"]

    originator.get_state_from_memento(care_taker.get(0))
    lines.append(f"First saved State: {originator.state}")
    originator.get_state_from_memento(care_taker.get(1))
    lines.append(f"Second saved State: {originator.state}")
    return lines
