"""Ordered in-memory task store.

Insertion order is display order. Indices are 0-based positions in that order
and shift only when tasks are removed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from taskdesk.errors import TaskIndexError
from taskdesk.models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Owns the ordered list of tasks and every mutation of it."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in display order."""
        return list(self._tasks)

    def count(self) -> int:
        """Return the number of tasks."""
        return len(self._tasks)

    def _check(self, index: int) -> None:
        # Negative indices are rejected rather than wrapped.
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def get(self, index: int) -> Task:
        """Get the task at a position."""
        self._check(index)
        return self._tasks[index]

    def add(self, task: Task) -> None:
        """Append a task to the end of the list."""
        self._tasks.append(task)
        logger.debug("Added task %r at index %d", task.text, len(self._tasks) - 1)

    def set_completed(self, index: int, value: bool) -> Task:
        """Set the completion flag of the task at a position.

        Raises:
            TaskIndexError: If the index is out of range.
        """
        self._check(index)
        task = self._tasks[index]
        task.completed = value
        logger.debug("Task %d completed=%s", index, value)
        return task

    def incomplete(self, indices: Iterable[int]) -> list[tuple[int, Task]]:
        """Return the incomplete tasks among the given positions.

        Out-of-range positions are skipped. Results are in ascending index order
        with duplicates collapsed.
        """
        valid = sorted({i for i in indices if 0 <= i < len(self._tasks)})
        return [(i, self._tasks[i]) for i in valid if not self._tasks[i].completed]

    def remove_many(self, indices: Iterable[int]) -> int:
        """Remove the tasks at the given positions as a set.

        Positions may be unordered, repeated or out of range; out-of-range ones
        are ignored. Removal runs from the highest position down so earlier
        positions never shift mid-operation.

        Returns:
            Number of tasks removed.
        """
        size = len(self._tasks)
        valid = sorted({i for i in indices if 0 <= i < size}, reverse=True)
        for index in valid:
            del self._tasks[index]
        logger.debug("Removed %d task(s) at %s", len(valid), valid)
        return len(valid)

    def remove_one(self, index: int) -> Task:
        """Remove and return the task at a position.

        Raises:
            TaskIndexError: If the index is out of range.
        """
        self._check(index)
        task = self._tasks.pop(index)
        logger.debug("Removed task %r from index %d", task.text, index)
        return task

    def clear(self) -> int:
        """Remove every task. Returns how many were removed."""
        removed = len(self._tasks)
        self._tasks.clear()
        if removed:
            logger.debug("Cleared %d task(s)", removed)
        return removed
