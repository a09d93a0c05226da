"""Tests for taskdesk.render module."""

from __future__ import annotations

from rich.console import Console

from taskdesk.config import DisplayConfig
from taskdesk.models import Task
from taskdesk.render import DisplayHint, render, status_text, styled_text, task_table


class TestRender:
    """Tests for render."""

    def test_pending(self) -> None:
        """Test the hint for an incomplete task."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM")
        assert render(task) == DisplayHint(style="red", strike=False)

    def test_completed(self) -> None:
        """Test the hint for a completed task."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM", completed=True)
        assert render(task) == DisplayHint(style="green", strike=True)

    def test_custom_display(self) -> None:
        """Test that the display config drives the hint."""
        display = DisplayConfig(completed_style="blue", strike_completed=False)
        task = Task(text="Buy milk", scheduled_time="6:30 AM", completed=True)
        assert render(task, display) == DisplayHint(style="blue", strike=False)


class TestStyledText:
    """Tests for styled_text."""

    def test_strikethrough_applied(self) -> None:
        """Test that completed tasks are struck through."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM", completed=True)
        text = styled_text(task, task.text)
        assert text.plain == "Buy milk"
        assert text.style.strike is True

    def test_pending_not_struck(self) -> None:
        """Test that incomplete tasks are not struck through."""
        task = Task(text="Buy milk", scheduled_time="6:30 AM")
        assert not styled_text(task, task.text).style.strike


class TestStatusText:
    """Tests for status_text."""

    def test_status(self) -> None:
        """Test the status line format."""
        assert status_text(0) == "Tasks: 0"
        assert status_text(12) == "Tasks: 12"


class TestTaskTable:
    """Tests for task_table."""

    def _render(self, table: object) -> str:
        console = Console(width=100, no_color=True)
        with console.capture() as capture:
            console.print(table)
        return capture.get()

    def test_rows(self) -> None:
        """Test that each task appears with its time."""
        tasks = [
            Task(text="Buy milk", scheduled_time="6:30 AM"),
            Task(text="Stand-up", scheduled_time="09:15", completed=True),
        ]
        output = self._render(task_table(tasks))
        assert "Buy milk" in output
        assert "6:30 AM" in output
        assert "Stand-up" in output
        assert "Scheduled Time" in output

    def test_index_column(self) -> None:
        """Test that the index column follows show_index."""
        tasks = [Task(text="Buy milk", scheduled_time="6:30 AM")]
        assert len(task_table(tasks).columns) == 4
        assert len(task_table(tasks, DisplayConfig(show_index=False)).columns) == 3
