"""Tests for tasklist.render module."""

from __future__ import annotations

import io

from rich.console import Console

from tasklist.render import print_tasks, render_tasks
from tasklist.store import TaskStore


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


class TestRenderTasks:
    """Tests for render_tasks()."""

    def test_columns(self) -> None:
        """Test the table has the expected headers."""
        table = render_tasks([])
        assert [c.header for c in table.columns] == [
            "Task ID",
            "Description",
            "Due Date",
            "Priority",
            "Status",
        ]

    def test_one_row_per_task(self) -> None:
        """Test each entry becomes a row."""
        store = TaskStore()
        store.create("Buy milk", "2024-01-01", "low")
        store.create("Walk dog", "2024-01-02", "high")
        assert render_tasks(store.list()).row_count == 2

    def test_title(self) -> None:
        """Test a custom title is used."""
        assert render_tasks([], title="Pending Tasks").title == "Pending Tasks"


class TestPrintTasks:
    """Tests for print_tasks()."""

    def test_empty_message(self) -> None:
        """Test the empty message is printed instead of a table."""
        console, buffer = _console()
        print_tasks(console, [], empty_message="Nothing here.")
        assert buffer.getvalue().strip() == "Nothing here."

    def test_status_labels(self) -> None:
        """Test completed and pending tasks are labelled."""
        store = TaskStore()
        store.create("Buy milk", "2024-01-01", "low")
        store.create("Walk dog", "2024-01-02", "high")
        store.complete(1)
        console, buffer = _console()

        print_tasks(console, store.list())

        output = buffer.getvalue()
        assert "Buy milk" in output
        assert "Completed" in output
        assert "Not Completed" in output

    def test_markup_in_text_is_not_interpreted(self) -> None:
        """Test user text with square brackets is shown literally."""
        store = TaskStore()
        store.create("[bold]fix[/bold] the bug", "[soon]", "high")
        console, buffer = _console()

        print_tasks(console, store.list())

        assert "[bold]fix[/bold] the bug" in buffer.getvalue()
        assert "[soon]" in buffer.getvalue()
