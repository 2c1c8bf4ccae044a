"""Tests for the visitor pattern."""
from gof_patterns.behavioral.visitor import (
    Computer,
    ComputerPartDisplayVisitor,
    ComputerPartVisitor,
    Keyboard,
    Monitor,
    Mouse,
)


class CountingVisitor(ComputerPartVisitor):
    def __init__(self):
        self.visited = []

    def visit_keyboard(self, keyboard):
        self.visited.append("keyboard")
        return "k"

    def visit_mouse(self, mouse):
        self.visited.append("mouse")
        return "m"

    def visit_monitor(self, monitor):
        self.visited.append("monitor")
        return "n"

    def visit_computer(self, computer):
        self.visited.append("computer")
        return "c"


def test_display_visitor_visits_children_then_computer():
    assert Computer().accept(ComputerPartDisplayVisitor()) == [
        "Displaying Mouse.",
        "Displaying Keyboard.",
        "Displaying Monitor.",
        "Displaying Computer.",
    ]


def test_double_dispatch_selects_visit_method():
    visitor = CountingVisitor()
    for part in (Keyboard(), Monitor(), Mouse()):
        part.accept(visitor)

    assert visitor.visited == ["keyboard", "monitor", "mouse"]


def test_new_operation_without_changing_parts():
    visitor = CountingVisitor()

    assert Computer([Keyboard(), Keyboard()]).accept(visitor) == ["k", "k", "c"]
