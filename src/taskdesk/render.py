"""Display hints for tasks.

Rendering depends only on a task's completion flag and the display config, so
any view can ask how to draw a task without touching the store.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style
from rich.table import Table
from rich.text import Text

from taskdesk.config import DisplayConfig
from taskdesk.models import Task


@dataclass(frozen=True)
class DisplayHint:
    """How to draw one task."""

    style: str
    strike: bool

    def to_style(self) -> Style:
        return Style.parse(self.style) + Style(strike=self.strike)


def render(task: Task, display: DisplayConfig | None = None) -> DisplayHint:
    """Return the display hint for a task."""
    if display is None:
        display = DisplayConfig()

    if task.completed:
        return DisplayHint(style=display.completed_style, strike=display.strike_completed)
    return DisplayHint(style=display.pending_style, strike=False)


def styled_text(task: Task, value: str, display: DisplayConfig | None = None) -> Text:
    """Wrap a cell value in the task's display hint."""
    return Text(value, style=render(task, display).to_style())


def status_text(count: int) -> str:
    """Return the status line for a task count."""
    return f"Tasks: {count}"


def task_table(tasks: list[Task], display: DisplayConfig | None = None) -> Table:
    """Build the task table shown by the shell."""
    if display is None:
        display = DisplayConfig()

    table = Table(title="Tasks", show_header=True)
    if display.show_index:
        table.add_column("#", style="dim", justify="right")
    table.add_column("Completed", justify="center")
    table.add_column("Task")
    table.add_column("Scheduled Time")

    for number, task in enumerate(tasks, 1):
        row: list[str | Text] = [str(number)] if display.show_index else []
        row.append("[green]✓[/green]" if task.completed else "[dim]✗[/dim]")
        row.append(styled_text(task, task.text, display))
        row.append(styled_text(task, task.scheduled_time, display))
        table.add_row(*row)

    return table
