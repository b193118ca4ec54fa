"""
Tests for the expression tokenizer.
"""

import pytest

from backend.calc.errors import (
    EvaluationError,
    MissingOperandError,
    UnrecognizedSymbolError,
)
from backend.calc.logic import Tokenizer
from backend.calc.logic.tokens import (
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    format_tokens,
)


@pytest.fixture
def tokenizer():
    return Tokenizer()


class TestTokenize:
    """Tests for Tokenizer.tokenize."""

    def test_simple_expression(self, tokenizer):
        """Test that numbers and operators become separate tokens."""
        tokens = tokenizer.tokenize("12+2")
        assert tokens == [
            NumberToken(12.0, "12"),
            OperatorToken(Operator.ADD),
            NumberToken(2.0, "2"),
        ]

    def test_all_operators_and_parentheses(self, tokenizer):
        """Test every operator and parenthesis symbol."""
        tokens = tokenizer.tokenize("(1+2-3*4/5^6)")
        assert format_tokens(tokens) == "( 1 + 2 - 3 * 4 / 5 ^ 6 )"
        assert isinstance(tokens[0], LeftParen)
        assert isinstance(tokens[-1], RightParen)

    def test_decimal_number(self, tokenizer):
        """Test that a decimal point is part of the number."""
        tokens = tokenizer.tokenize("3.25*2")
        assert tokens[0] == NumberToken(3.25, "3.25")

    def test_whitespace_is_stripped(self, tokenizer):
        """Test that whitespace anywhere is ignored."""
        assert tokenizer.tokenize(" 1 2 +\t3\n") == tokenizer.tokenize("12+3")

    def test_empty_input(self, tokenizer):
        """Test that empty or blank input gives no tokens."""
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize("   ") == []

    def test_minus_is_always_binary(self, tokenizer):
        """Test that a leading minus is an operator, not a sign."""
        tokens = tokenizer.tokenize("-3")
        assert tokens == [OperatorToken(Operator.SUBTRACT), NumberToken(3.0, "3")]

    def test_number_at_end(self, tokenizer):
        """Test that a trailing number is not lost."""
        tokens = tokenizer.tokenize("(1)+234")
        assert tokens[-1] == NumberToken(234.0, "234")

    def test_tokens_are_immutable(self, tokenizer):
        """Test that tokens cannot be modified."""
        token = tokenizer.tokenize("7")[0]
        with pytest.raises(Exception):
            token.value = 8.0


class TestTokenizeErrors:
    """Tests for tokenizer failures."""

    @pytest.mark.parametrize("expression", ["1.2.3", "1.", ".5", "2+.", "3..4"])
    def test_malformed_number(self, tokenizer, expression):
        """Test that badly formed numbers are rejected."""
        with pytest.raises(MissingOperandError):
            tokenizer.tokenize(expression)

    def test_unrecognized_symbol(self, tokenizer):
        """Test that unknown characters are reported with their position."""
        with pytest.raises(UnrecognizedSymbolError) as exc_info:
            tokenizer.tokenize("2 + x")
        assert exc_info.value.symbol == "x"
        assert exc_info.value.position == 2
        assert "'x'" in exc_info.value.message

    def test_overflowing_literal(self, tokenizer):
        """Test that a literal too large for a float is rejected."""
        with pytest.raises(EvaluationError):
            tokenizer.tokenize("1" * 400)

    @pytest.mark.parametrize("expression", ["2%3", "sqrt(4)", "1,5", "2e3"])
    def test_unsupported_syntax(self, tokenizer, expression):
        """Test that functions, modulo and scientific notation are rejected."""
        with pytest.raises(UnrecognizedSymbolError):
            tokenizer.tokenize(expression)
