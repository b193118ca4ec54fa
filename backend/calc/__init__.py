"""
Calc: arithmetic expression calculator.

This package evaluates infix arithmetic expressions by tokenizing them,
converting them to postfix with the shunting-yard algorithm and evaluating
the postfix sequence on a value stack.
"""

from .errors import (
    EvaluationError,
    MissingOperandError,
    DivisionByZeroError,
    MissingOperatorError,
    UnrecognizedSymbolError,
    OperatorNotFoundError,
    EmptyExpressionError,
)
from .config import CalculatorConfig
from .engine import Calculator, EvaluationResult, evaluate

__version__ = "1.0.0"
__all__ = [
    "evaluate",
    "Calculator",
    "CalculatorConfig",
    "EvaluationResult",
    "EvaluationError",
    "MissingOperandError",
    "DivisionByZeroError",
    "MissingOperatorError",
    "UnrecognizedSymbolError",
    "OperatorNotFoundError",
    "EmptyExpressionError",
]
