"""
Tests for the infix to postfix converter and the operator table.
"""

import pytest

from backend.calc.errors import MissingOperatorError, OperatorNotFoundError
from backend.calc.logic import InfixToPostfixConverter, Tokenizer
from backend.calc.logic.tokens import Associativity, Operator, format_tokens


def to_postfix(expression):
    tokens = Tokenizer().tokenize(expression)
    return format_tokens(InfixToPostfixConverter().convert(tokens))


class TestOperatorTable:
    """Tests for operator precedence and associativity."""

    @pytest.mark.parametrize(
        "symbol,precedence,associativity",
        [
            ("+", 2, Associativity.LEFT),
            ("-", 2, Associativity.LEFT),
            ("*", 3, Associativity.LEFT),
            ("/", 3, Associativity.LEFT),
            ("^", 4, Associativity.RIGHT),
        ],
    )
    def test_table(self, symbol, precedence, associativity):
        """Test the fixed precedence and associativity table."""
        op = Operator.from_symbol(symbol)
        assert op.symbol == symbol
        assert op.precedence == precedence
        assert op.associativity is associativity

    def test_unknown_symbol(self):
        """Test that unknown operator symbols are rejected."""
        with pytest.raises(OperatorNotFoundError):
            Operator.from_symbol("%")

    def test_apply_uses_left_right_order(self):
        """Test that apply computes left op right."""
        assert Operator.SUBTRACT.apply(10, 3) == 7
        assert Operator.DIVIDE.apply(20, 5) == 4
        assert Operator.POWER.apply(2, 3) == 8


class TestConvert:
    """Tests for InfixToPostfixConverter.convert."""

    def test_precedence(self):
        """Test that multiplication binds tighter than addition."""
        assert to_postfix("2+3*4") == "2 3 4 * +"
        assert to_postfix("2*3+4") == "2 3 * 4 +"

    def test_parentheses(self):
        """Test that parentheses override precedence."""
        assert to_postfix("(2+3)*4") == "2 3 + 4 *"

    def test_left_associative(self):
        """Test that equal-precedence left-associative operators group left."""
        assert to_postfix("10-3-2") == "10 3 - 2 -"
        assert to_postfix("20/5*2") == "20 5 / 2 *"

    def test_right_associative_power(self):
        """Test that exponentiation groups right."""
        assert to_postfix("2^3^2") == "2 3 2 ^ ^"

    def test_classic_example(self):
        """Test the textbook shunting-yard example."""
        assert to_postfix("3+4*2/(1-5)^2^3") == "3 4 2 * 1 5 - 2 3 ^ ^ / +"

    def test_nested_parentheses(self):
        """Test deeply nested parentheses."""
        assert to_postfix("((1+2))*((3))") == "1 2 + 3 *"

    def test_empty(self):
        """Test that no tokens give no output."""
        assert InfixToPostfixConverter().convert([]) == []

    def test_input_not_mutated(self):
        """Test that the input sequence is left untouched."""
        tokens = Tokenizer().tokenize("1+2*3")
        snapshot = list(tokens)
        InfixToPostfixConverter().convert(tokens)
        assert tokens == snapshot


class TestConvertErrors:
    """Tests for unbalanced parentheses."""

    @pytest.mark.parametrize("expression", ["(2+3", "((1)", "2+3)", ")(", "1)+(2"])
    def test_unbalanced(self, expression):
        """Test that unmatched parentheses are reported."""
        with pytest.raises(MissingOperatorError):
            to_postfix(expression)
