"""CLI interface for taskdesk."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from taskdesk import __version__
from taskdesk.config import CONFIG_FILE, TaskdeskConfig
from taskdesk.controller import TaskController
from taskdesk.errors import EmptyFieldError, InvalidTimeError, TaskIndexError
from taskdesk.logging_setup import setup_logging
from taskdesk.messages import (
    clear_message,
    delete_many_message,
    delete_one_message,
    empty_field_message,
    invalid_time_message,
)
from taskdesk.render import task_table
from taskdesk.validation import parse_time, time_format

console = Console()
logger = logging.getLogger(__name__)

SHELL_HELP = """\
[bold]Commands[/bold] (task numbers start at 1):

  [cyan]add <task> @ <time>[/cyan]   Add a task, e.g. add Buy milk @ 6:30 AM
  [cyan]add[/cyan]                   Prompt for task and time
  [cyan]list[/cyan]                  Show all tasks
  [cyan]done <n>[/cyan]              Mark a task completed
  [cyan]undo <n>[/cyan]              Mark a task not completed
  [cyan]rm <n> [<n> ...][/cyan]      Delete the selected tasks
  [cyan]del <n>[/cyan]               Delete one task
  [cyan]clear[/cyan]                 Delete every task
  [cyan]count[/cyan]                 Show the task count
  [cyan]help[/cyan]                  Show this help
  [cyan]quit[/cyan]                  Leave the shell"""


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskdesk")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """taskdesk - a task list with scheduled times.

    \b
    Usage:
      taskdesk shell              # Interactive task list
      taskdesk check-time 6:30PM  # Check a time string
    """
    ctx.ensure_object(dict)

    try:
        config = TaskdeskConfig.load(config_path)
    except ValueError as e:
        # pydantic's ValidationError and json's JSONDecodeError are both ValueErrors
        console.print(f"[red]Invalid config:[/red] {escape(str(e))}")
        ctx.exit(1)

    setup_logging(
        console_level=logging.DEBUG if verbose else config.logging.level,
        log_file=config.logging.file,
    )
    ctx.obj["config"] = config

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("check-time")
@click.argument("value")
@click.pass_context
def check_time(ctx: click.Context, value: str) -> None:
    """Check whether TIME is a valid scheduled time.

    \b
    Examples:
      taskdesk check-time "6:30 AM"
      taskdesk check-time 14:00
    """
    normalised = value.strip().upper()
    try:
        parsed = parse_time(normalised)
    except InvalidTimeError:
        console.print(f"[red]Invalid time:[/red] {escape(value)}")
        ctx.exit(1)

    fmt = "12-hour" if time_format(normalised) == "12h" else "24-hour"
    console.print(f"[green]✓[/green] {normalised} [dim]({fmt}, {parsed.strftime('%H:%M')})[/dim]")


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Manage tasks interactively.

    Tasks live for the length of the session.
    """
    config: TaskdeskConfig = ctx.obj["config"]
    session = ShellSession(TaskController(), config)

    console.print(Panel.fit("[bold]taskdesk[/bold]  [dim]type 'help' for commands[/dim]"))
    console.print(session.controller.status_text())

    while True:
        try:
            line = click.prompt("taskdesk", prompt_suffix="> ", default="", show_default=False)
            keep_going = session.handle(line)
        except click.Abort:
            console.print()
            break

        if not keep_going:
            break


def _parse_numbers(args: list[str]) -> list[int] | None:
    """Turn 1-based task numbers into 0-based indices."""
    try:
        return [int(arg) - 1 for arg in args]
    except ValueError:
        return None


class ShellSession:
    """Dispatches shell lines to the controller and prints the results."""

    def __init__(self, controller: TaskController, config: TaskdeskConfig) -> None:
        self.controller = controller
        self.config = config

    def handle(self, line: str) -> bool:
        """Run one shell line. Returns False when the session should end."""
        command, _, rest = line.strip().partition(" ")
        command = command.lower()
        args = rest.split()

        if not command:
            return True
        if command in ("quit", "exit"):
            return False

        logger.debug("Shell command %r", command)
        handlers = {
            "add": lambda: self.add(rest),
            "list": self.show,
            "ls": self.show,
            "done": lambda: self.toggle(args, True),
            "undo": lambda: self.toggle(args, False),
            "rm": lambda: self.delete_many(args),
            "del": lambda: self.delete_one(args),
            "clear": self.clear,
            "count": self.status,
            "help": lambda: console.print(SHELL_HELP),
        }
        handler = handlers.get(command)
        if handler is None:
            console.print(f"[red]Unknown command:[/red] {escape(command)}  [dim](try 'help')[/dim]")
            return True

        try:
            handler()
        except TaskIndexError as e:
            console.print(f"[red]No task #{e.index + 1}.[/red] There are {e.size} task(s).")
        return True

    def status(self) -> None:
        console.print(self.controller.status_text())

    def show(self) -> None:
        tasks = self.controller.store.tasks
        if not tasks:
            console.print("[dim]No tasks.[/dim]")
            return
        console.print(task_table(tasks, self.config.display))

    def add(self, rest: str) -> None:
        if rest.strip():
            text, sep, time_text = rest.rpartition(" @ ")
            if not sep:
                text, time_text = rest, ""
        else:
            text = click.prompt("Task", default="", show_default=False)
            time_text = click.prompt(
                f"Time (e.g., {self.config.prompts.time_hint})", default="", show_default=False
            )

        try:
            task = self.controller.on_add(text, time_text)
        except EmptyFieldError:
            console.print(f"[red]Error:[/red] {empty_field_message()}")
            return
        except InvalidTimeError:
            message = invalid_time_message(self.config.prompts.time_hint)
            console.print(f"[red]Error:[/red] {escape(message)}")
            return

        console.print(f"[green]Added:[/green] {escape(task.label())}")
        self.status()

    def toggle(self, args: list[str], value: bool) -> None:
        indices = _parse_numbers(args)
        if not indices or len(indices) != 1:
            console.print("[yellow]Please select one task by number.[/yellow]")
            return

        task = self.controller.on_toggle_complete(indices[0], value)
        state = "completed" if value else "not completed"
        console.print(f"[green]Marked {state}:[/green] {escape(task.label())}")
        self.status()

    def delete_many(self, args: list[str]) -> None:
        indices = _parse_numbers(args)
        if indices is None:
            console.print("[red]Task numbers must be integers.[/red]")
            return

        size = self.controller.current_count()
        selected = sorted({i for i in indices if 0 <= i < size})
        if not selected:
            console.print("[yellow]Please select at least one task to delete![/yellow]")
            return

        if self.config.prompts.confirm_deletes:
            pending = self.controller.pending_among(selected)
            if not click.confirm(delete_many_message(len(selected), pending), default=False):
                console.print("[dim]Cancelled.[/dim]")
                return

        removed = self.controller.on_delete_many(selected)
        console.print(f"[green]Deleted {removed} task(s).[/green]")
        self.status()

    def delete_one(self, args: list[str]) -> None:
        indices = _parse_numbers(args)
        if not indices or len(indices) != 1:
            console.print("[yellow]Please select a task to delete![/yellow]")
            return

        index = indices[0]
        if self.config.prompts.confirm_deletes:
            task = self.controller.store.get(index)
            if not click.confirm(delete_one_message(task), default=False):
                console.print("[dim]Cancelled.[/dim]")
                return

        task = self.controller.on_delete_one(index)
        console.print(f"[green]Deleted:[/green] {escape(task.label())}")
        self.status()

    def clear(self) -> None:
        count = self.controller.current_count()
        if count == 0:
            return

        if self.config.prompts.confirm_clear and not click.confirm(
            clear_message(), default=False
        ):
            console.print("[dim]Cancelled.[/dim]")
            return

        self.controller.on_clear()
        self.status()
