"""Interpreter - evaluate a small grammar of word-matching rules recursively."""

from abc import ABC, abstractmethod


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: str) -> bool:
        pass


class TerminalExpression(Expression):
    def __init__(self, data: str):
        self.data = data

    def interpret(self, context: str) -> bool:
        return self.data in context


class OrExpression(Expression):
    def __init__(self, expr1: Expression, expr2: Expression):
        self.expr1 = expr1
        self.expr2 = expr2

    def interpret(self, context: str) -> bool:
        return self.expr1.interpret(context) or self.expr2.interpret(context)


class AndExpression(Expression):
    def __init__(self, expr1: Expression, expr2: Expression):
        self.expr1 = expr1
        self.expr2 = expr2

    def interpret(self, context: str) -> bool:
        return self.expr1.interpret(context) and self.expr2.interpret(context)


def get_male_expression() -> Expression:
    """Rule: Robert and John are male."""
    return OrExpression(TerminalExpression("Robert"), TerminalExpression("John"))


def get_married_woman_expression() -> Expression:
    """Rule: Julie is a married woman."""
    return AndExpression(TerminalExpression("Julie"), TerminalExpression("Married"))


def demo():
    is_male = get_male_expression()
    is_married_woman = get_married_woman_expression()
    return [
        f"John is male? {is_male.interpret('John')}",
        f"Julie is a married women? {is_married_woman.interpret('Married Julie')}",
    ]
