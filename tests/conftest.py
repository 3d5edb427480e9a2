"""Shared fixtures for tasklist tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo root logger changes made by setup_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's TASKLIST_FILE does not leak into tests."""
    monkeypatch.delenv("TASKLIST_FILE", raising=False)


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
def sample_tasks_data() -> dict:
    """Sample task file content."""
    return {
        "1": {
            "description": "Buy milk",
            "due_date": "2024-01-01",
            "priority": "low",
            "completed": True,
            "id": 1,
        },
        "2": {
            "description": "Write report",
            "due_date": "2024-03-15",
            "priority": "high",
            "completed": False,
            "id": 2,
        },
        "5": {
            "description": "Call the bank",
            "due_date": "2024-02-10",
            "priority": "medium",
            "completed": False,
            "id": 5,
        },
    }


@pytest.fixture
def sample_tasks_file(temp_project: Path, sample_tasks_data: dict) -> Path:
    """Write sample tasks to tasks.json in the temp project."""
    tasks_path = temp_project / "tasks.json"
    with open(tasks_path, "w") as f:
        json.dump(sample_tasks_data, f, indent=2)
    return tasks_path
