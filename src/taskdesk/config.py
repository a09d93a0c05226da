"""Configuration models for taskdesk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Configuration for how tasks are drawn."""

    completed_style: str = "green"
    pending_style: str = "red"
    strike_completed: bool = True
    show_index: bool = True


class PromptsConfig(BaseModel):
    """Configuration for interactive prompts."""

    confirm_deletes: bool = True
    confirm_clear: bool = True
    time_hint: str = "6:30 AM"


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TaskdeskConfig(BaseModel):
    """Main configuration for taskdesk."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    prompts: PromptsConfig = Field(default_factory=PromptsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskdeskConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TASKDESK_DIR = Path(".taskdesk")
CONFIG_FILE = TASKDESK_DIR / "config.json"
