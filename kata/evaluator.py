"""Evaluation of integer arithmetic expression trees."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Value:
    """A literal integer value."""

    value: int


@dataclass(frozen=True)
class BinaryOperation:
    """An operation on two subexpressions."""

    op: Operation
    left: "Expression"
    right: "Expression"


Expression = Union[Value, BinaryOperation]


class EvaluationError(ArithmeticError):
    """Raised when an expression cannot be evaluated."""


def _truncating_division(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Evaluate ``expression`` and return its integer result.

    Division truncates toward zero. Raises EvaluationError on division by zero.
    """
    match expression:
        case Value(value):
            return value
        case BinaryOperation(op, left, right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            match op:
                case Operation.ADD:
                    return lhs + rhs
                case Operation.SUB:
                    return lhs - rhs
                case Operation.MUL:
                    return lhs * rhs
                case Operation.DIV:
                    if rhs == 0:
                        raise EvaluationError("division by zero")
                    return _truncating_division(lhs, rhs)
    raise TypeError(f"not an expression: {expression!r}")