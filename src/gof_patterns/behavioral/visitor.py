"""Visitor - add operations over computer parts without touching the part classes."""

from abc import ABC, abstractmethod
from typing import List, Optional


class ComputerPartVisitor(ABC):
    @abstractmethod
    def visit_keyboard(self, keyboard: 'Keyboard') -> str:
        pass

    @abstractmethod
    def visit_mouse(self, mouse: 'Mouse') -> str:
        pass

    @abstractmethod
    def visit_monitor(self, monitor: 'Monitor') -> str:
        pass

    @abstractmethod
    def visit_computer(self, computer: 'Computer') -> str:
        pass


class ComputerPart(ABC):
    @abstractmethod
    def accept(self, visitor: ComputerPartVisitor) -> List[str]:
        pass


class Keyboard(ComputerPart):
    def accept(self, visitor: ComputerPartVisitor) -> List[str]:
        return [visitor.visit_keyboard(self)]


class Mouse(ComputerPart):
    def accept(self, visitor: ComputerPartVisitor) -> List[str]:
        return [visitor.visit_mouse(self)]


class Monitor(ComputerPart):
    def accept(self, visitor: ComputerPartVisitor) -> List[str]:
        return [visitor.visit_monitor(self)]


class Computer(ComputerPart):
    """Composite part: children are visited first, then the computer itself."""

    def __init__(self, parts: Optional[List[ComputerPart]] = None):
        self.parts = parts if parts is not None else [Mouse(), Keyboard(), Monitor()]

    def accept(self, visitor: ComputerPartVisitor) -> List[str]:
        results: List[str] = []
        for part in self.parts:
            results.extend(part.accept(visitor))
        results.append(visitor.visit_computer(self))
        return results


class ComputerPartDisplayVisitor(ComputerPartVisitor):
    def visit_keyboard(self, keyboard: Keyboard) -> str:
        return "Displaying Keyboard."

    def visit_mouse(self, mouse: Mouse) -> str:
        return "Displaying Mouse."

    def visit_monitor(self, monitor: Monitor) -> str:
        return "Displaying Monitor."

    def visit_computer(self, computer: Computer) -> str:
        return "Displaying Computer."


def demo():
    return Computer().accept(ComputerPartDisplayVisitor())
