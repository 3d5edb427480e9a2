"""Load and save a TaskStore as a JSON file.

File format: a JSON object keyed by decimal task ids, e.g.

    {
      "1": {
        "description": "Buy milk",
        "due_date": "2024-01-01",
        "priority": "low",
        "completed": false,
        "id": 1
      }
    }

Loading never fails: a missing, unreadable or malformed file gives an empty
store. A single bad record rejects the whole file.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tasklist.config import DEFAULT_TASKS_FILE
from tasklist.models import Task
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)

class CorruptTaskFile(ValueError):
    """The task file content does not match the expected schema."""


class SaveError(OSError):
    """The task file could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not save tasks to {path}: {reason}")
        self.path = path
        self.reason = reason


class PersistenceCodec:
    """Reads and writes one task file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else Path(DEFAULT_TASKS_FILE)

    @staticmethod
    def encode(store: TaskStore) -> dict[str, dict[str, Any]]:
        """Convert a store to the on-disk JSON shape, ordered by id."""
        tasks = sorted(store.tasks.items(), key=lambda entry: entry[1].id)
        return {key: task.model_dump() for key, task in tasks}

    @staticmethod
    def decode(data: Any) -> TaskStore:
        """Build a store from parsed JSON.

        Raises:
            CorruptTaskFile: If anything in ``data`` does not fit the schema.
        """
        if not isinstance(data, dict):
            raise CorruptTaskFile(f"expected a JSON object, got {type(data).__name__}")

        tasks: dict[str, Task] = {}
        for key, record in data.items():
            try:
                task = Task.model_validate(record)
            except ValidationError as e:
                raise CorruptTaskFile(f"invalid task {key!r}: {e}") from e

            if key != str(task.id):
                raise CorruptTaskFile(f"key {key!r} does not match task id {task.id}")
            tasks[key] = task

        return TaskStore(tasks)

    def load(self) -> TaskStore:
        """Load the store, falling back to an empty one."""
        if not self.path.exists():
            logger.debug("No task file at %s, starting empty", self.path)
            return TaskStore()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            store = self.decode(data)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s (%s), starting empty", self.path, e)
            return TaskStore()
        except (ValueError, RecursionError) as e:
            logger.warning("Ignoring corrupt task file %s: %s", self.path, e)
            return TaskStore()

        logger.info("Loaded %d tasks from %s", len(store), self.path)
        return store

    def save(self, store: TaskStore) -> None:
        """Write the full store, replacing the file in one step.

        Raises:
            SaveError: If the file could not be written.
        """
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(self.encode(store), f, indent=2)
                f.write("\n")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Failed to save tasks to %s: %s", self.path, e)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise SaveError(self.path, e.strerror or str(e)) from e

        logger.info("Saved %d tasks to %s", len(store), self.path)
