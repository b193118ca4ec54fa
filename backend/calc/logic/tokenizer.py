"""
Tokenizer for arithmetic expressions.

Splits a raw string such as "12+2" into [12, +, 2].
"""

from __future__ import annotations

import math
import re
from typing import List

from ..errors import (
    MISSING_OPERAND,
    EvaluationError,
    MissingOperandError,
    UnrecognizedSymbolError,
)
from .tokens import (
    OPERATOR_SYMBOLS,
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    Token,
)


NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?")
WHITESPACE = re.compile(r"\s+")


class Tokenizer:
    """
    Converts expression text into an ordered list of tokens.

    Whitespace is removed before scanning, so reported positions refer to
    the stripped text. A '-' is always the binary operator.
    """

    NUMBER_CHARS = "0123456789."

    def tokenize(self, expression: str) -> List[Token]:
        """
        Tokenize an expression.

        Args:
            expression: The expression text.

        Returns:
            List of tokens; empty for empty or blank input.

        Raises:
            MissingOperandError: If a number is malformed (e.g. "1.2.3").
            UnrecognizedSymbolError: If an unsupported character is found.
        """
        text = WHITESPACE.sub("", expression)
        tokens: List[Token] = []
        number: List[str] = []

        for position, char in enumerate(text):
            if char in self.NUMBER_CHARS:
                number.append(char)
                continue

            if number:
                tokens.append(self._make_number("".join(number)))
                number = []

            if char in OPERATOR_SYMBOLS:
                tokens.append(OperatorToken(Operator.from_symbol(char)))
            elif char == "(":
                tokens.append(LeftParen())
            elif char == ")":
                tokens.append(RightParen())
            else:
                raise UnrecognizedSymbolError(char, position)

        if number:
            tokens.append(self._make_number("".join(number)))

        return tokens

    def _make_number(self, text: str) -> NumberToken:
        if not NUMBER_PATTERN.fullmatch(text):
            raise MissingOperandError(f"{MISSING_OPERAND}: {text!r}")
        value = float(text)
        if not math.isfinite(value):
            raise EvaluationError("Numeric overflow")
        return NumberToken(value=value, text=text)
