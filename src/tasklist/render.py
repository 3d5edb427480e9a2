"""Rich rendering helpers for task listings."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasklist.store import TaskEntry


def render_tasks(tasks: Sequence[TaskEntry], title: str = "Task List") -> Table:
    """Build a table of tasks in the given order."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Task ID", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Due Date", style="white")
    table.add_column("Priority", style="white")
    table.add_column("Status")

    for task_id, task in tasks:
        status = "[green]Completed[/green]" if task.completed else "[red]Not Completed[/red]"
        table.add_row(
            escape(task_id),
            escape(task.description),
            escape(task.due_date),
            escape(task.priority),
            status,
        )

    return table


def print_tasks(
    console: Console,
    tasks: Sequence[TaskEntry],
    title: str = "Task List",
    empty_message: str = "No tasks to display.",
) -> None:
    """Print a task table, or the empty message when there is nothing to show."""
    if not tasks:
        console.print(f"[dim]{empty_message}[/dim]")
        return

    console.print(render_tasks(tasks, title=title))
