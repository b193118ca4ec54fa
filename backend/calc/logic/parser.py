"""
Infix to postfix conversion.

Reorders tokens into Reverse Polish order with the shunting-yard algorithm.
"""

from __future__ import annotations

from typing import List, Sequence

from ..errors import MissingOperatorError, OperatorNotFoundError
from .tokens import LeftParen, NumberToken, OperatorToken, RightParen, Token


class InfixToPostfixConverter:
    """
    Converter from infix token sequences to postfix token sequences.

    Converts tokens like:
        3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3

    Into postfix order:
        3 4 2 * 1 5 - 2 3 ^ ^ / +

    The input sequence is never modified; each call works on its own stacks.
    """

    def convert(self, tokens: Sequence[Token]) -> List[Token]:
        """
        Convert an infix token sequence to postfix.

        Args:
            tokens: Tokens in infix order.

        Returns:
            A new list of tokens in postfix order.

        Raises:
            MissingOperatorError: If parentheses are unbalanced.
        """
        output: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                output.append(token)
            elif isinstance(token, OperatorToken):
                while stack and self._should_pop(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                self._pop_until_left_paren(stack, output)
            else:
                raise OperatorNotFoundError()

        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                # "(" that was never closed
                raise MissingOperatorError()
            output.append(top)

        return output

    def _should_pop(self, top: Token, current: OperatorToken) -> bool:
        """Whether the operator on top of the stack binds before current."""
        if not isinstance(top, OperatorToken):
            return False

        top_op = top.operator
        op = current.operator
        if top_op.precedence > op.precedence:
            return True
        return top_op.precedence == op.precedence and op.is_left_associative

    def _pop_until_left_paren(self, stack: List[Token], output: List[Token]) -> None:
        """Move operators to output until the matching "(" and drop it."""
        while stack:
            top = stack.pop()
            if isinstance(top, LeftParen):
                return
            output.append(top)
        raise MissingOperatorError()
