"""Data models for taskpad."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Task:
    """A single task: a label plus a completion flag."""

    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialisation."""
        return {"text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Create from a stored record.

        Raises ValueError if the record is not a ``{text, completed}`` object.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task record must be an object, got {type(data).__name__}")

        text = data.get("text")
        completed = data.get("completed", False)

        if not isinstance(text, str) or not text:
            raise ValueError(f"Task record has no usable text: {data!r}")
        if not isinstance(completed, bool):
            raise ValueError(f"Task record has non-boolean completed flag: {data!r}")

        return cls(text=text, completed=completed)

    def __str__(self) -> str:
        status = "✓" if self.completed else "○"
        return f"[{status}] {self.text}"


@dataclass(frozen=True)
class AddTask:
    """Intent: append a new open task."""

    text: str


@dataclass(frozen=True)
class ToggleTask:
    """Intent: flip completion on every task labelled ``text``."""

    text: str


Intent = Union[AddTask, ToggleTask]
