"""Tests for taskdesk.messages module."""

from __future__ import annotations

from taskdesk.messages import (
    clear_message,
    delete_many_message,
    delete_one_message,
    empty_field_message,
    invalid_time_message,
)
from taskdesk.models import Task


class TestMessages:
    """Tests for message rendering."""

    def test_empty_field(self) -> None:
        """Test the empty field error."""
        assert empty_field_message() == "Task and time cannot be empty!"

    def test_invalid_time_hint(self) -> None:
        """Test that the invalid time error includes the hint."""
        assert invalid_time_message() == "Enter a valid time (e.g., '6:30 AM' or '14:00')!"
        assert "'7:00 PM'" in invalid_time_message("7:00 PM")

    def test_delete_many_with_pending(self) -> None:
        """Test that incomplete tasks are listed."""
        pending = [
            Task(text="Buy milk", scheduled_time="6:30 AM"),
            Task(text="Call mum", scheduled_time="18:00"),
        ]
        assert delete_many_message(3, pending) == (
            "The following tasks are not completed:\n"
            "Buy milk (6:30 AM)\n"
            "Call mum (18:00)\n"
            "\n"
            "Are you sure you want to delete them?"
        )

    def test_delete_many_all_complete(self) -> None:
        """Test the plain confirmation when nothing is pending."""
        assert delete_many_message(2, []) == "Delete 2 selected task(s)?"

    def test_delete_one_pending(self) -> None:
        """Test the warning for an incomplete task."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM")
        assert delete_one_message(task) == (
            "Task 'Buy milk (6:30 AM)' is not completed.\n"
            "Are you sure you want to delete it?"
        )

    def test_delete_one_completed(self) -> None:
        """Test the confirmation for a completed task."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM", completed=True)
        assert delete_one_message(task) == "Delete task 'Buy milk'?"

    def test_clear(self) -> None:
        """Test the clear confirmation."""
        assert clear_message() == "Clear all tasks?"
