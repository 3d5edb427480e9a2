"""Configuration models for tasklist."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_TASKS_FILE = "tasks.json"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: LogLevel = "WARNING"
    file: str | None = ".tasklist/tasklist.log"
    file_level: LogLevel = "DEBUG"


class DisplayConfig(BaseModel):
    """Configuration for the interactive shell."""

    pause_after_action: bool = True
    show_empty_message: str = "No tasks to display."


class TasklistConfig(BaseModel):
    """Main configuration for tasklist."""

    tasks_file: str = DEFAULT_TASKS_FILE
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TasklistConfig:
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
            json.dump(self.model_dump(), f, indent=2)

    def resolve_tasks_file(self, override: str | None = None) -> Path:
        """Pick the task file: explicit override, then $TASKLIST_FILE, then config."""
        return Path(override or os.environ.get(TASKS_FILE_ENV) or self.tasks_file)


# Default config directory
TASKLIST_DIR = Path(".tasklist")
CONFIG_FILE = TASKLIST_DIR / "config.json"
TASKS_FILE_ENV = "TASKLIST_FILE"
