"""
Evaluation History.

Records every evaluation as one JSON line so sessions can be reviewed later.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from .engine import EvaluationResult


@dataclass
class HistoryEntry:
    """
    A single recorded evaluation.

    Attributes:
        entry_id: Unique identifier for this entry.
        timestamp: ISO format timestamp (UTC).
        expression: The expression as entered.
        success: Whether evaluation succeeded.
        value: The result, or None on failure or for NaN.
        error: Error message if failed.
        duration_ms: Duration in milliseconds.
    """

    entry_id: str
    timestamp: str
    expression: str
    success: bool
    value: Optional[float] = None
    error: Optional[str] = None
    duration_ms: float = 0.0

    @classmethod
    def create(cls, result: EvaluationResult) -> "HistoryEntry":
        """Create an entry from an evaluation result."""
        data = result.to_dict()
        return cls(
            entry_id=str(uuid4()),
            timestamp=datetime.now(timezone.utc).isoformat(),
            expression=result.expression,
            success=result.success,
            value=data["value"],
            error=result.error,
            duration_ms=result.duration_ms,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(**data)

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> "HistoryEntry":
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


class EvaluationHistory:
    """
    Append-only JSONL store of evaluations.

    Unreadable lines are skipped when reading back.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def record(self, result: EvaluationResult) -> HistoryEntry:
        """
        Append an evaluation result to the history.

        Args:
            result: The evaluation to record.

        Returns:
            The created history entry.
        """
        entry = HistoryEntry.create(result)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")
        return entry

    def iter_entries(self) -> Iterator[HistoryEntry]:
        """Yield recorded entries in the order they were written."""
        if not self.path.exists():
            return

        with open(self.path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield HistoryEntry.from_json(line)
                except (json.JSONDecodeError, TypeError):
                    continue

    def get_entries(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        """
        Get recorded entries.

        Args:
            limit: If given, only the most recent ``limit`` entries.

        Returns:
            Entries, oldest first.
        """
        entries = list(self.iter_entries())
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return entries

    def clear(self) -> None:
        """Delete the history file."""
        if self.path.exists():
            self.path.unlink()
