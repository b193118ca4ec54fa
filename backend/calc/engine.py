"""
Calculator Engine.

Combines the tokenizer, the infix to postfix converter and the postfix
evaluator into a single evaluation pipeline.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .config import CalculatorConfig
from .errors import EmptyExpressionError, EvaluationError
from .logic import InfixToPostfixConverter, PostfixEvaluator, Tokenizer
from .logic.tokens import Token, format_tokens


logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """
    Outcome of a single evaluation.

    On success ``value`` holds the result; on failure ``error`` holds the
    message and ``error_kind`` the error class name.
    """

    expression: str
    success: bool
    value: Optional[float] = None
    postfix: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    duration_ms: float = 0.0

    def summary(self) -> str:
        """One-line description of the result."""
        if self.success:
            return f"{self.expression} = {self.value}"
        return f"{self.expression}: {self.error_kind}: {self.error}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        value = self.value
        if value is not None and math.isnan(value):
            value = None
        return {
            "expression": self.expression,
            "success": self.success,
            "value": value,
            "postfix": self.postfix,
            "error": self.error,
            "error_kind": self.error_kind,
            "duration_ms": self.duration_ms,
        }


class Calculator:
    """
    Arithmetic expression calculator.

    Each call builds its own token lists and stacks, so one instance can be
    shared freely.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the calculator.

        Args:
            config: Optional settings; defaults are used when omitted.
        """
        self.config = config or CalculatorConfig()
        self.tokenizer = Tokenizer()
        self.converter = InfixToPostfixConverter()
        self.evaluator = PostfixEvaluator()

    def to_postfix(self, expression: str) -> List[Token]:
        """Tokenize an expression and return it in postfix order."""
        return self.converter.convert(self.tokenizer.tokenize(expression))

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an expression.

        Args:
            expression: Infix expression text.

        Returns:
            The numeric result, or NaN for empty input unless the config
            asks for an error.

        Raises:
            EvaluationError: On any malformed expression or arithmetic failure.
        """
        _, value = self._run(expression)
        return value

    def _run(self, expression: str) -> Tuple[Optional[List[Token]], float]:
        if not expression.strip():
            if self.config.empty_expression == "error":
                raise EmptyExpressionError()
            return None, math.nan

        postfix = self.to_postfix(expression)
        value = self.evaluator.evaluate(postfix)
        logger.debug("Evaluated %r as [%s] = %r", expression, format_tokens(postfix), value)
        return postfix, value

    def try_evaluate(self, expression: str) -> EvaluationResult:
        """
        Evaluate an expression without raising EvaluationError.

        Args:
            expression: Infix expression text.

        Returns:
            EvaluationResult describing the value or the failure.
        """
        start = time.perf_counter()
        result = EvaluationResult(expression=expression, success=False)

        try:
            postfix, result.value = self._run(expression)
            if postfix is not None:
                result.postfix = format_tokens(postfix)
            result.success = True
        except EvaluationError as e:
            logger.debug("Evaluation of %r failed: %s: %s", expression, e.kind, e.message)
            result.error = e.message
            result.error_kind = e.kind

        result.duration_ms = (time.perf_counter() - start) * 1000
        return result


def evaluate(expression: str) -> float:
    """
    Convenience function to evaluate an expression with default settings.

    Args:
        expression: Infix expression text.

    Returns:
        The numeric result, or NaN for empty input.
    """
    return Calculator().evaluate(expression)
