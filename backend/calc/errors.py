"""
Evaluation errors.

Every failure the pipeline can detect is an EvaluationError subclass, raised
by the stage that detects it and propagated to the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


MISSING_OPERAND = "Missing or bad operand"
DIV_BY_ZERO = "Division with 0"
MISSING_OPERATOR = "Missing operator or parenthesis"
OP_NOT_FOUND = "Operator not found"
EMPTY_EXPRESSION = "Empty expression"


class EvaluationError(ValueError):
    """Base class for all expression evaluation failures."""

    default_message = "Evaluation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Name of the error class, used when reporting failures."""
        return type(self).__name__


class MissingOperandError(EvaluationError):
    """Too few values for an operator, or a leftover value at the end."""

    default_message = MISSING_OPERAND


class DivisionByZeroError(EvaluationError):
    """The divisor of a division is zero."""

    default_message = DIV_BY_ZERO


class MissingOperatorError(EvaluationError):
    """Unbalanced parentheses or an unusable symbol between operands."""

    default_message = MISSING_OPERATOR


class UnrecognizedSymbolError(MissingOperatorError):
    """A character that is not a digit, decimal point, operator or parenthesis."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unrecognized symbol {symbol!r} at position {position}")


class OperatorNotFoundError(EvaluationError):
    """A token claims to be an operator but matches no known symbol."""

    default_message = OP_NOT_FOUND


class EmptyExpressionError(EvaluationError):
    """The expression is empty and the configuration asks for an error."""

    default_message = EMPTY_EXPRESSION
