"""Observer - a Subject fans each state change out to its observers."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Observer(ABC):
    """Base observer; ``received`` keeps every line the observer produced."""

    def __init__(self, subject: Optional['Subject'] = None):
        self.received: List[str] = []
        if subject is not None:
            subject.attach(self)

    @abstractmethod
    def update(self, state: int) -> str:
        pass


class Subject:
    def __init__(self):
        self._observers: List[Observer] = []
        self._state: Optional[int] = None

    @property
    def state(self) -> Optional[int]:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value
        self.notify_all_observers()

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)
            logger.debug("Attached observer", observer=type(observer).__name__)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_all_observers(self) -> List[str]:
        """Notify observers in attachment order and return what they produced."""
        if self._state is None:
            return []
        logger.debug("Notifying observers", count=len(self._observers), state=self._state)
        return [observer.update(self._state) for observer in self._observers]


class BinaryObserver(Observer):
    def update(self, state: int) -> str:
        line = f"Binary String: {state:b}"
        self.received.append(line)
        return line


class OctalObserver(Observer):
    def update(self, state: int) -> str:
        line = f"Octal String: {state:o}"
        self.received.append(line)
        return line


class HexaObserver(Observer):
    def update(self, state: int) -> str:
        line = f"Hex String: {state:X}"
        self.received.append(line)
        return line


def demo():
    subject = Subject()
    observers = [HexaObserver(subject), OctalObserver(subject), BinaryObserver(subject)]

    lines = ["First state change: 15"]
    subject.state = 15
    lines.extend(line for observer in observers for line in observer.received)
    for observer in observers:
        observer.received.clear()

    lines.append("Second state change: 10")
    subject.state = 10
    lines.extend(line for observer in observers for line in observer.received)
    return lines
