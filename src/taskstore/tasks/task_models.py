# src/taskstore/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

# "No due date" marker: year 1, midnight UTC.
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


def parse_timestamp(raw: str | datetime) -> datetime:
    """
    Parse an ISO-8601 timestamp.

    Accepts a trailing "Z" for UTC. A datetime passes through unchanged.
    """
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    s = raw.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    tags: tuple[str, ...]
    due: datetime

    def due_date(self) -> tuple[int, int, int]:
        """Calendar date of `due` in its own timezone."""
        return self.due.year, self.due.month, self.due.day

    def has_tag(self, tag: str) -> bool:
        for t in self.tags:
            if t == tag:
                return True
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "tags": list(self.tags),
            "due": self.due.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Task:
        """Build a Task from a decoded JSON object. Raises ValueError on malformed input."""
        if not isinstance(data, Mapping):
            raise ValueError(f"task payload must be an object, got {type(data).__name__}")

        if "id" not in data:
            raise ValueError("task payload is missing 'id'")
        raw_id = data["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"task id must be an integer, got {raw_id!r}")
        if raw_id < 0:
            raise ValueError(f"task id must be non-negative, got {raw_id}")

        text = data.get("text", "")
        if not isinstance(text, str):
            raise ValueError(f"task text must be a string, got {type(text).__name__}")

        tags = data.get("tags", [])
        if tags is None:
            tags = []
        if not isinstance(tags, (list, tuple)) or not all(isinstance(t, str) for t in tags):
            raise ValueError("task tags must be a list of strings")

        raw_due = data.get("due")
        due = ZERO_TIME if raw_due is None else parse_timestamp(raw_due)

        return cls(id=raw_id, text=text, tags=tuple(tags), due=due)
