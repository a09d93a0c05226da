"""Data models for taskdesk."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Task:
    """A single task with a scheduled time."""

    text: str
    scheduled_time: str
    completed: bool = False

    def label(self) -> str:
        """Return the task as ``text (time)``."""
        return f"{self.text} ({self.scheduled_time})"

    def __str__(self) -> str:
        status = "✓" if self.completed else "○"
        return f"[{status}] {self.text} @ {self.scheduled_time}"
