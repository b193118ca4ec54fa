"""
Expression pipeline for the calculator.

Provides tokenizing, infix to postfix conversion and postfix evaluation.
"""

from .tokenizer import Tokenizer
from .parser import InfixToPostfixConverter
from .evaluator import PostfixEvaluator

__all__ = ["Tokenizer", "InfixToPostfixConverter", "PostfixEvaluator"]
