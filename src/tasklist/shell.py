"""Interactive menu loop for tasklist.

The shell works on the in-memory store for the whole session and hands it
to the codec exactly once, when the user exits (or interrupts).
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape

from tasklist.config import TasklistConfig
from tasklist.persistence import PersistenceCodec, SaveError
from tasklist.render import print_tasks
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)

# (action, menu label) in display order
MENU_OPTIONS: list[tuple[str, str]] = [
    ("add", "[green]Add a task[/green]"),
    ("list", "[cyan]List tasks[/cyan]"),
    ("done", "[magenta]Mark a task as done[/magenta]"),
    ("sort", "[cyan]Sort tasks by due date[/cyan]"),
    ("filter", "[magenta]Filter tasks by completion[/magenta]"),
    ("delete", "[red]Delete a task[/red]"),
    ("exit", "[yellow]Exit[/yellow]"),
]

NOT_FOUND_MESSAGE = "Task not found with the provided ID."


class Shell:
    """Menu-driven session over a TaskStore."""

    def __init__(
        self,
        store: TaskStore,
        codec: PersistenceCodec,
        config: TasklistConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.store = store
        self.codec = codec
        self.config = config or TasklistConfig()
        self.console = console or Console()
        self._handlers = {
            "add": self.add_task,
            "list": self.list_tasks,
            "done": self.mark_task_done,
            "sort": self.sort_tasks,
            "filter": self.filter_tasks,
            "delete": self.delete_task,
        }

    def run(self) -> int:
        """Run the menu until Exit; returns the process exit code."""
        try:
            while True:
                action = self.prompt_action()
                if action == "exit":
                    break

                self._handlers[action]()

                if self.config.display.pause_after_action:
                    click.pause("Press Enter to continue...")
        except click.Abort:
            logger.info("Session interrupted, saving before exit")
            self.console.print()
            self.console.print("[dim]Interrupted.[/dim]")

        return self.save()

    def prompt_action(self) -> str:
        """Show the menu and return the chosen action."""
        self.console.print()
        self.console.print("[bold blue]Task List CLI[/bold blue]")
        for i, (_, label) in enumerate(MENU_OPTIONS, 1):
            self.console.print(f"  [cyan]{i}[/cyan]. {label}")

        choice = click.prompt(
            "Select an option",
            type=click.IntRange(1, len(MENU_OPTIONS)),
            default=1,
            show_default=True,
        )
        return MENU_OPTIONS[choice - 1][0]

    def add_task(self) -> None:
        self.console.print("[bold green]Add a Task[/bold green]")
        description = click.prompt("Enter task description")
        due_date = click.prompt("Enter due date", default="", show_default=False)
        priority = click.prompt(
            "Enter priority of the task (e.g., high or low)",
            default="",
            show_default=False,
        )

        task = self.store.create(description, due_date, priority)
        self.console.print(f"[green]Task added![/green] (ID {task.id})")

    def list_tasks(self) -> None:
        self._show(self.store.list())

    def sort_tasks(self) -> None:
        self._show(self.store.sorted_by_due_date(), title="Tasks by Due Date")

    def filter_tasks(self) -> None:
        self.console.print("  [cyan]1[/cyan]. Completed")
        self.console.print("  [cyan]2[/cyan]. Not Completed")
        choice = click.prompt(
            "Select a status to filter by",
            type=click.IntRange(1, 2),
            default=1,
            show_default=True,
        )
        completed = choice == 1
        title = "Completed Tasks" if completed else "Pending Tasks"
        self._show(self.store.filter_by_completion(completed), title=title)

    def mark_task_done(self) -> None:
        if not self.store:
            self.console.print("No tasks to mark as done.")
            return

        self.console.print("[bold magenta]Mark a Task as Done[/bold magenta]")
        self.list_tasks()
        task_id = click.prompt("Enter the task ID to mark as done")

        if self.store.complete(task_id) is None:
            self.console.print(f"[red]{NOT_FOUND_MESSAGE}[/red]")
        else:
            self.console.print("[green]Task marked as done.[/green]")

    def delete_task(self) -> None:
        if not self.store:
            self.console.print("No tasks to delete.")
            return

        self.console.print("[bold red]Delete a Task[/bold red]")
        self.list_tasks()
        task_id = click.prompt("Enter the task ID to delete")

        if self.store.delete(task_id) is None:
            self.console.print(f"[red]{NOT_FOUND_MESSAGE}[/red]")
        else:
            self.console.print("[green]Task deleted.[/green]")

    def save(self) -> int:
        """Persist the store once; report (but survive) a failed write."""
        try:
            self.codec.save(self.store)
        except SaveError as e:
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            self.console.print("[yellow]Your changes from this session were not saved.[/yellow]")
            return 1

        path = escape(str(self.codec.path))
        self.console.print(f"[dim]Saved {len(self.store)} tasks to {path}[/dim]")
        return 0

    def _show(self, tasks, title: str = "Task List") -> None:
        print_tasks(
            self.console,
            tasks,
            title=title,
            empty_message=self.config.display.show_empty_message,
        )
