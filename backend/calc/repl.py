"""
Interactive read-evaluate-print loop.

Usage:
    python -m backend.calc                 # interactive session
    python -m backend.calc "2+3*4"         # evaluate once and exit
    python -m backend.calc --precision 2 --history calc.jsonl
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import yaml
from pydantic import ValidationError

from .config import CalculatorConfig
from .engine import Calculator, EvaluationResult
from .history import EvaluationHistory


logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


class Repl:
    """
    Reads expressions line by line and prints their values.

    Errors are printed as ``Error: <message>`` and the loop continues.
    """

    def __init__(
        self,
        calculator: Calculator,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        history: Optional[EvaluationHistory] = None,
    ):
        self.calculator = calculator
        self.config = calculator.config
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.history = history

    def format_result(self, result: EvaluationResult) -> str:
        if result.success:
            return self.config.format_value(result.value)
        return f"Error: {result.error}"

    def evaluate_line(self, line: str) -> EvaluationResult:
        """Evaluate one line, print the outcome and record it."""
        result = self.calculator.try_evaluate(line)
        self.output_fn(self.format_result(result))
        if self.history is not None:
            try:
                self.history.record(result)
            except OSError as e:
                logger.warning("Could not record history to %s: %s", self.history.path, e)
        return result

    def run(self) -> int:
        """
        Run until end of input or a quit command.

        Returns:
            Number of expressions evaluated.
        """
        count = 0
        while True:
            try:
                line = self.input_fn(self.config.prompt)
            except (EOFError, KeyboardInterrupt):
                break

            if line.strip().lower() in QUIT_COMMANDS:
                break

            self.evaluate_line(line)
            count += 1

        logger.info("Session ended after %d expressions", count)
        return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate arithmetic expressions (+ - * / ^ and parentheses).",
    )
    parser.add_argument("expression", nargs="?", help="Evaluate this expression and exit")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--precision", type=int, help="Decimal places in printed results")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--history", type=Path, help="Record evaluations to this JSONL file")
    return parser


def load_config(args: argparse.Namespace) -> CalculatorConfig:
    """Build the configuration from a config file plus command-line overrides."""
    config = CalculatorConfig.from_file(args.config) if args.config else CalculatorConfig()

    overrides = {}
    if args.precision is not None:
        overrides["precision"] = args.precision
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.history:
        overrides["history_file"] = args.history

    if overrides:
        config = CalculatorConfig(**{**config.model_dump(), **overrides})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as e:
        parser.error(f"invalid configuration: {e}")

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    calculator = Calculator(config)
    history = EvaluationHistory(config.history_file) if config.history_file else None
    repl = Repl(calculator, history=history)

    if args.expression is not None:
        result = repl.evaluate_line(args.expression)
        return 0 if result.success else 1

    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
