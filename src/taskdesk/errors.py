"""Exceptions raised by the taskdesk core."""

from __future__ import annotations


class TaskdeskError(Exception):
    """Base class for all taskdesk errors."""


class ValidationError(TaskdeskError):
    """Raw task input was rejected before a task was created."""


class EmptyFieldError(ValidationError):
    """Task text or time text was blank."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Empty field(s): {', '.join(fields)}")


class InvalidTimeError(ValidationError):
    """Time text did not match either accepted clock format."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid time: {value!r}")


class TaskIndexError(TaskdeskError, IndexError):
    """Index does not address a task in the current list."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Task index {index} out of range (list has {size} task(s))")
