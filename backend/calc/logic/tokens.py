"""
Token types and the operator table.
"""

from __future__ import annotations

import math
import operator as _op
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from ..errors import DivisionByZeroError, EvaluationError, OperatorNotFoundError


class Associativity(str, Enum):
    """Grouping direction for operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivisionByZeroError()
    return left / right


def _power(left: float, right: float) -> float:
    try:
        result = left ** right
    except OverflowError:
        raise EvaluationError("Numeric overflow")
    except ZeroDivisionError:
        # 0 raised to a negative power
        raise DivisionByZeroError()
    if isinstance(result, complex):
        raise EvaluationError("Result is not a real number")
    return result


class Operator(Enum):
    """
    Binary operators with their precedence, associativity and function.

    Members are looked up by symbol with Operator.from_symbol().
    """

    ADD = ("+", 2, Associativity.LEFT, _op.add)
    SUBTRACT = ("-", 2, Associativity.LEFT, _op.sub)
    MULTIPLY = ("*", 3, Associativity.LEFT, _op.mul)
    DIVIDE = ("/", 3, Associativity.LEFT, _divide)
    POWER = ("^", 4, Associativity.RIGHT, _power)

    def __init__(
        self,
        symbol: str,
        precedence: int,
        associativity: Associativity,
        func: Callable[[float, float], float],
    ):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.func = func

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Return the operator for a symbol, or raise OperatorNotFoundError."""
        for member in cls:
            if member.symbol == symbol:
                return member
        raise OperatorNotFoundError()

    @property
    def is_left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT

    def apply(self, left: float, right: float) -> float:
        """Compute ``left <op> right``."""
        result = self.func(left, right)
        if not math.isfinite(result):
            raise EvaluationError("Numeric overflow")
        return result

    def __str__(self) -> str:
        return self.symbol


OPERATOR_SYMBOLS = "".join(op.symbol for op in Operator)


@dataclass(frozen=True)
class NumberToken:
    """A non-negative decimal literal."""

    value: float
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator

    def __str__(self) -> str:
        return self.operator.symbol


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Union[NumberToken, OperatorToken, LeftParen, RightParen]


def format_tokens(tokens) -> str:
    """Render a token sequence as space separated symbols, e.g. '2 3 +'."""
    return " ".join(str(t) for t in tokens)
