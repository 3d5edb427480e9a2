"""Data models for tasklist."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A single to-do item.

    ``due_date`` and ``priority`` are free text. They are stored and compared
    exactly as entered, never parsed.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    description: str
    due_date: str
    priority: str
    completed: bool
    id: int = Field(ge=0)

    def mark_completed(self) -> None:
        """Mark the task as completed (no-op if already completed)."""
        self.completed = True
