"""taskdesk - a small interactive task list with scheduled times."""

__version__ = "0.1.0"
