"""
Postfix Evaluator.

Evaluates Reverse Polish token sequences with a value stack.
"""

from __future__ import annotations

from typing import List, Sequence

from ..errors import MissingOperandError, OperatorNotFoundError
from .tokens import NumberToken, OperatorToken, Token


class PostfixEvaluator:
    """
    Evaluator for postfix token sequences.

    For an operator the most recently pushed value is the right operand, so
    "10 3 -" evaluates to 10 - 3.
    """

    def evaluate(self, postfix: Sequence[Token]) -> float:
        """
        Evaluate a postfix sequence.

        Args:
            postfix: Tokens in postfix order.

        Returns:
            The single value left on the stack.

        Raises:
            MissingOperandError: If an operator lacks operands or the
                sequence does not reduce to exactly one value.
            DivisionByZeroError: If a divisor is zero.
            OperatorNotFoundError: If a non-operator token (a parenthesis)
                appears where an operator is expected.
        """
        stack: List[float] = []

        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(token.value)
            elif isinstance(token, OperatorToken):
                right = self._pop(stack)
                left = self._pop(stack)
                stack.append(token.operator.apply(left, right))
            else:
                raise OperatorNotFoundError()

        if len(stack) != 1:
            raise MissingOperandError()

        return stack[0]

    def _pop(self, stack: List[float]) -> float:
        if not stack:
            raise MissingOperandError()
        return stack.pop()
