"""In-memory task store.

Tasks are keyed by the decimal string of their id. The next id is derived
from the highest id seen so it never needs to be persisted, and it only ever
moves forward within a session, even after deletes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from tasklist.models import Task

logger = logging.getLogger(__name__)

TaskEntry = tuple[str, Task]


def by_due_date(entries: Iterable[TaskEntry]) -> list[TaskEntry]:
    """Order entries by due date compared as plain text.

    "10" sorts before "2". The sort is stable, so ties keep their input order.
    """
    return sorted(entries, key=lambda entry: entry[1].due_date)


def _normalise_id(task_id: int | str) -> str:
    """Turn an int or raw user input into a store key."""
    return str(task_id).strip()


class TaskStore:
    """Mapping from task id to Task with add/complete/delete and query views."""

    def __init__(self, tasks: Mapping[str, Task] | None = None) -> None:
        self._tasks: dict[str, Task] = dict(tasks or {})
        self._next_id = max((task.id for task in self._tasks.values()), default=0) + 1

    @property
    def next_id(self) -> int:
        """The id the next created task will receive."""
        return self._next_id

    @property
    def tasks(self) -> dict[str, Task]:
        """A shallow copy of the id -> Task mapping."""
        return dict(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        if not isinstance(task_id, (int, str)):
            return False
        return _normalise_id(task_id) in self._tasks

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskStore(tasks={len(self._tasks)}, next_id={self._next_id})"

    def create(self, description: str, due_date: str, priority: str) -> Task:
        """Add a new, not yet completed task and return it."""
        task = Task(
            id=self._next_id,
            description=description,
            due_date=due_date,
            priority=priority,
            completed=False,
        )
        self._tasks[str(task.id)] = task
        self._next_id += 1
        logger.debug("Created task %d", task.id)
        return task

    def list(self) -> list[TaskEntry]:
        """All entries in no particular order."""
        return list(self._tasks.items())

    def get(self, task_id: int | str) -> Task | None:
        """Get a task by id."""
        return self._tasks.get(_normalise_id(task_id))

    def complete(self, task_id: int | str) -> Task | None:
        """Mark a task as completed.

        Returns:
            The completed task, or None if no task has that id.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("Complete: task %r not found", task_id)
            return None

        task.mark_completed()
        logger.debug("Completed task %d", task.id)
        return task

    def delete(self, task_id: int | str) -> Task | None:
        """Remove a task.

        Returns:
            The removed task, or None if no task has that id.
        """
        task = self._tasks.pop(_normalise_id(task_id), None)
        if task is None:
            logger.debug("Delete: task %r not found", task_id)
            return None

        logger.debug("Deleted task %d", task.id)
        return task

    def sorted_by_due_date(self) -> list[TaskEntry]:
        """Entries ordered by due date as plain text; see by_due_date()."""
        return by_due_date(self._tasks.items())

    def filter_by_completion(self, completed: bool) -> list[TaskEntry]:
        """Entries whose completion flag equals ``completed``."""
        return [(key, task) for key, task in self._tasks.items() if task.completed == completed]
