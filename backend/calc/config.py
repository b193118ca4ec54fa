"""
Calculator configuration.

Settings are kept in a small YAML file, either as a bare mapping or under a
top-level ``calculator:`` key:

    calculator:
      empty_expression: error
      precision: 4
      history_file: ~/.calc_history.jsonl
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CalculatorConfig(BaseModel):
    """Settings for the calculator engine and the interactive loop."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    empty_expression: Literal["nan", "error"] = Field(
        "nan", description="Return NaN for empty input, or raise EmptyExpressionError"
    )
    precision: Optional[int] = Field(
        None, ge=0, le=17, description="Decimal places when printing results"
    )
    prompt: str = Field("> ", description="Prompt shown by the interactive loop")
    history_file: Optional[Path] = Field(
        None, description="JSON-lines file recording every evaluation"
    )
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("history_file")
    @classmethod
    def expand_history_file(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "CalculatorConfig":
        """Load configuration from YAML content."""
        data = yaml.safe_load(yaml_content) or {}
        if not isinstance(data, dict):
            raise ValueError("Calculator config must be a mapping")
        if "calculator" in data:
            data = data["calculator"] or {}
            if not isinstance(data, dict):
                raise ValueError("Calculator config must be a mapping")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Path) -> "CalculatorConfig":
        """Load configuration from a file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_yaml(f.read())

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def format_value(self, value: float) -> str:
        """Render a result for display."""
        if self.precision is None or math.isnan(value):
            return str(value)
        return f"{value:.{self.precision}f}"
