"""Strategy - swap the operation a Context performs at runtime."""

from typing import Callable, Protocol, Union

Number = Union[int, float]


class Strategy(Protocol):
    def do_operation(self, num1: Number, num2: Number) -> Number:
        ...


class OperationAdd:
    def do_operation(self, num1: Number, num2: Number) -> Number:
        return num1 + num2


class OperationSubtract:
    def do_operation(self, num1: Number, num2: Number) -> Number:
        return num1 - num2


class OperationMultiply:
    def do_operation(self, num1: Number, num2: Number) -> Number:
        return num1 * num2


StrategyLike = Union[Strategy, Callable[[Number, Number], Number]]


class Context:
    """
    Holds the current strategy.

    Either a Strategy object or a plain two-argument callable may be given;
    the context keeps no state of its own between calls.
    """

    def __init__(self, strategy: StrategyLike):
        self._strategy = strategy

    def set_strategy(self, strategy: StrategyLike) -> None:
        self._strategy = strategy

    def execute_strategy(self, num1: Number, num2: Number) -> Number:
        if hasattr(self._strategy, "do_operation"):
            return self._strategy.do_operation(num1, num2)
        return self._strategy(num1, num2)


def demo():
    context = Context(OperationAdd())
    lines = [f"10 + 5 = {context.execute_strategy(10, 5)}"]
    context.set_strategy(OperationSubtract())
    lines.append(f"10 - 5 = {context.execute_strategy(10, 5)}")
    context.set_strategy(OperationMultiply())
    lines.append(f"10 * 5 = {context.execute_strategy(10, 5)}")
    context.set_strategy(lambda a, b: a // b)
    lines.append(f"10 // 5 = {context.execute_strategy(10, 5)}")
    return lines
