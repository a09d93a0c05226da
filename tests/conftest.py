"""Shared fixtures for taskdesk tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from taskdesk.logging_setup import _PackageFilter
from taskdesk.models import Task
from taskdesk.store import TaskStore


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Remove the handlers setup_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    try:
        yield
    finally:
        for h in list(root.handlers):
            ours = any(isinstance(f, _PackageFilter) for f in h.filters)
            if ours or type(h) is logging.FileHandler:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)
        logging.captureWarnings(False)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_taskdesk_dir(temp_project: Path) -> Path:
    """Create a temporary .taskdesk directory."""
    taskdesk_dir = temp_project / ".taskdesk"
    taskdesk_dir.mkdir()
    return taskdesk_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "display": {
            "completed_style": "blue",
            "pending_style": "yellow",
            "strike_completed": False,
            "show_index": False,
        },
        "prompts": {"confirm_deletes": False, "confirm_clear": True, "time_hint": "14:00"},
        "logging": {"level": "INFO"},
    }


@pytest.fixture
def abc_store() -> TaskStore:
    """A store holding tasks A, B and C in that order."""
    store = TaskStore()
    store.add(Task(text="A", scheduled_time="6:30 AM"))
    store.add(Task(text="B", scheduled_time="12:00 PM"))
    store.add(Task(text="C", scheduled_time="18:45"))
    return store
