"""User-facing message templates for taskdesk."""

from __future__ import annotations

from jinja2 import BaseLoader, Environment

from taskdesk.models import Task

EMPTY_FIELD_TEMPLATE = "Task and time cannot be empty!"

INVALID_TIME_TEMPLATE = "Enter a valid time (e.g., '{{ hint }}' or '14:00')!"

DELETE_MANY_TEMPLATE = """\
{% if pending -%}
The following tasks are not completed:
{% for task in pending -%}
{{ task.label() }}
{% endfor %}
Are you sure you want to delete them?
{%- else -%}
Delete {{ count }} selected task(s)?
{%- endif %}"""

DELETE_ONE_TEMPLATE = """\
{% if not task.completed -%}
Task '{{ task.label() }}' is not completed.
Are you sure you want to delete it?
{%- else -%}
Delete task '{{ task.text }}'?
{%- endif %}"""

CLEAR_TEMPLATE = "Clear all tasks?"

_env = Environment(loader=BaseLoader())


def _render(source: str, **context: object) -> str:
    return _env.from_string(source).render(**context)


def empty_field_message() -> str:
    return _render(EMPTY_FIELD_TEMPLATE)


def invalid_time_message(hint: str = "6:30 AM") -> str:
    return _render(INVALID_TIME_TEMPLATE, hint=hint)


def delete_many_message(count: int, pending: list[Task]) -> str:
    """Build the confirmation for deleting several tasks.

    Args:
        count: Number of tasks selected for deletion.
        pending: The selected tasks that are not completed yet.

    Returns:
        A warning listing the incomplete tasks, or a plain confirmation
        when every selected task is done.
    """
    return _render(DELETE_MANY_TEMPLATE, count=count, pending=pending)


def delete_one_message(task: Task) -> str:
    return _render(DELETE_ONE_TEMPLATE, task=task)


def clear_message() -> str:
    return _render(CLEAR_TEMPLATE)
