"""Arithmetic expression trees with a factory that shares constants and variables."""

from __future__ import annotations

import operator
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass

Context = Mapping[str, float]


class Expression(ABC):
    """A node of an arithmetic expression."""

    @abstractmethod
    def calculate(self, context: Context) -> float:
        """Evaluate with variable values taken from ``context``."""

    @abstractmethod
    def __str__(self) -> str:
        """Textual form of the expression."""


@dataclass(frozen=True, eq=False)
class Constant(Expression):
    """A fixed number."""

    value: float

    def calculate(self, context: Context) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, eq=False)
class Variable(Expression):
    """A named value looked up in the evaluation context."""

    name: str

    def calculate(self, context: Context) -> float:
        try:
            return context[self.name]
        except KeyError:
            raise KeyError(f"Variable '{self.name}' not found in context.") from None

    def __str__(self) -> str:
        return self.name


class BinaryOperator(Expression):
    """An operation applied to two sub-expressions."""

    symbol: str = ""
    _operation: Callable[[float, float], float]

    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def calculate(self, context: Context) -> float:
        return type(self)._operation(self.left.calculate(context), self.right.calculate(context))

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.left!r}, {self.right!r})"


class Addition(BinaryOperator):
    symbol = "+"
    _operation = staticmethod(operator.add)


class Subtraction(BinaryOperator):
    symbol = "-"
    _operation = staticmethod(operator.sub)


class Multiplication(BinaryOperator):
    symbol = "*"
    _operation = staticmethod(operator.mul)


class Division(BinaryOperator):
    symbol = "/"
    _operation = staticmethod(operator.truediv)

    def calculate(self, context: Context) -> float:
        divisor = self.right.calculate(context)
        if divisor == 0:
            raise ZeroDivisionError("Division by zero")
        return self.left.calculate(context) / divisor


class ExpressionFactory:
    """Shared source of leaf expressions; small integer constants and variables are reused."""

    _instance: ExpressionFactory | None = None

    def __new__(cls) -> ExpressionFactory:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._constants = {float(i): Constant(float(i)) for i in range(-5, 257)}
            instance._variables = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def instance(cls) -> ExpressionFactory:
        """The shared factory."""
        return cls()

    def create_constant(self, value: float) -> Constant:
        """A shared constant for pre-made values, otherwise a fresh one."""
        cached = self._constants.get(value)
        if cached is not None:
            return cached
        return Constant(float(value))

    def create_variable(self, name: str) -> Variable:
        """The shared variable called ``name``, created on first use."""
        variable = self._variables.get(name)
        if variable is None:
            variable = self._variables[name] = Variable(name)
        return variable

    def remove_variable(self, name: str) -> None:
        """Forget the shared variable called ``name``, if any."""
        self._variables.pop(name, None)


def main(argv: list[str] | None = None) -> int:
    """Build and evaluate two small expressions."""
    factory = ExpressionFactory.instance()
    c = factory.create_constant(2)
    x = factory.create_variable("x")
    expression = Addition(c, x)
    print(f"Expression: {expression}")
    print(f"Result: {expression.calculate({'x': 3}):g}")

    if factory.create_constant(2) is c:
        print("Constant flyweight works!")

    y = factory.create_variable("y")
    expression2 = Addition(x, y)
    print(f"Expression: {expression2}")
    print(f"Result: {expression2.calculate({'x': 5, 'y': 10}):g}")

    factory.remove_variable("y")
    return 0


if __name__ == "__main__":
    sys.exit(main())