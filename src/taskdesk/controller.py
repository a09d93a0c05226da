"""Task controller - the operations a view calls in response to user actions.

The controller owns one :class:`TaskStore`. Every operation is synchronous and
either completes or raises without changing the store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from taskdesk.errors import ValidationError
from taskdesk.models import Task
from taskdesk.render import status_text
from taskdesk.store import TaskStore
from taskdesk.validation import validate_entry

logger = logging.getLogger(__name__)


class TaskController:
    """Validates input and applies user actions to a task store."""

    def __init__(self, store: TaskStore | None = None) -> None:
        self.store = store if store is not None else TaskStore()

    def on_add(self, raw_text: str, raw_time: str) -> Task:
        """Validate raw input and append a new task.

        Raises:
            EmptyFieldError: If text or time is blank.
            InvalidTimeError: If the time fails strict parsing.
        """
        try:
            entry = validate_entry(raw_text, raw_time)
        except ValidationError as e:
            logger.info("Rejected task input: %s", e)
            raise

        task = Task(text=entry.text, scheduled_time=entry.time)
        self.store.add(task)
        return task

    def on_toggle_complete(self, index: int, value: bool) -> Task:
        return self.store.set_completed(index, value)

    def on_delete_many(self, indices: Iterable[int]) -> int:
        """Delete several tasks. Returns the number actually removed."""
        return self.store.remove_many(indices)

    def on_delete_one(self, index: int) -> Task:
        return self.store.remove_one(index)

    def on_clear(self) -> int:
        return self.store.clear()

    def current_count(self) -> int:
        return self.store.count()

    def pending_among(self, indices: Iterable[int]) -> list[Task]:
        """Return the incomplete tasks among the targeted positions.

        Views use this to decide whether a deletion needs a stronger warning.
        """
        return [task for _, task in self.store.incomplete(indices)]

    def status_text(self) -> str:
        return status_text(self.store.count())
