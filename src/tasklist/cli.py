"""CLI interface for tasklist."""

from __future__ import annotations

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from tasklist import __version__
from tasklist.config import CONFIG_FILE, TasklistConfig
from tasklist.logging_setup import setup_logging, verbosity_to_level
from tasklist.persistence import PersistenceCodec, SaveError
from tasklist.render import print_tasks
from tasklist.shell import Shell
from tasklist.store import TaskStore, by_due_date

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tasklist")
@click.option(
    "--file",
    "-f",
    "tasks_file",
    type=click.Path(dir_okay=False),
    help="Task file to use (default: tasks.json, or $TASKLIST_FILE)",
)
@click.option("--verbose", "-v", count=True, help="Log more to stderr (-vv for debug)")
@click.pass_context
def main(ctx: click.Context, tasks_file: str | None, verbose: int) -> None:
    """tasklist - manage your to-do list from the terminal.

    Run without a command to open the interactive menu.

    \b
    One-shot usage:
      tasklist add "Buy milk" -d 2024-01-01 -p low
      tasklist list --sort due
      tasklist list --status pending
      tasklist done 1
      tasklist delete 2
      tasklist init
    """
    try:
        config = TasklistConfig.load()
    except (ValidationError, ValueError, OSError) as e:
        raise click.UsageError(f"Invalid config file {CONFIG_FILE}: {e}") from e

    setup_logging(
        level=verbosity_to_level(verbose, default=config.logging.level),
        log_file=config.logging.file,
        file_level=config.logging.file_level,
    )

    codec = PersistenceCodec(config.resolve_tasks_file(tasks_file))

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["codec"] = codec

    if ctx.invoked_subcommand is None:
        shell = Shell(codec.load(), codec, config=config, console=console)
        ctx.exit(shell.run())


@main.command()
@click.argument("description")
@click.option("--due", "-d", "due_date", default="", help="Due date (free text)")
@click.option("--priority", "-p", default="", help="Priority, e.g. high or low")
@click.pass_context
def add(ctx: click.Context, description: str, due_date: str, priority: str) -> None:
    """Add a task."""
    codec: PersistenceCodec = ctx.obj["codec"]

    store = codec.load()
    task = store.create(description, due_date, priority)
    _save_or_exit(ctx, codec, store)

    console.print(f"[green]Task added:[/green] #{task.id} {escape(task.description)}")


@main.command("list")
@click.option("--sort", "sort_by", type=click.Choice(["due"]), help="Sort the listing")
@click.option(
    "--status",
    type=click.Choice(["done", "pending"]),
    help="Only show completed or pending tasks",
)
@click.pass_context
def list_command(ctx: click.Context, sort_by: str | None, status: str | None) -> None:
    """List tasks."""
    config: TasklistConfig = ctx.obj["config"]
    codec: PersistenceCodec = ctx.obj["codec"]

    store = codec.load()

    if status is not None:
        entries = store.filter_by_completion(status == "done")
    else:
        entries = store.list()

    if sort_by == "due":
        entries = by_due_date(entries)

    print_tasks(console, entries, empty_message=config.display.show_empty_message)


@main.command()
@click.argument("task_id")
@click.pass_context
def done(ctx: click.Context, task_id: str) -> None:
    """Mark a task as complete."""
    codec: PersistenceCodec = ctx.obj["codec"]

    store = codec.load()
    task = store.complete(task_id)

    if task is None:
        console.print(f"[red]Task not found:[/red] {escape(task_id)}")
        ctx.exit(1)

    _save_or_exit(ctx, codec, store)
    console.print(f"[green]Task completed:[/green] #{task.id} {escape(task.description)}")


@main.command()
@click.argument("task_id")
@click.pass_context
def delete(ctx: click.Context, task_id: str) -> None:
    """Delete a task."""
    codec: PersistenceCodec = ctx.obj["codec"]

    store = codec.load()
    task = store.delete(task_id)

    if task is None:
        console.print(f"[red]Task not found:[/red] {escape(task_id)}")
        ctx.exit(1)

    _save_or_exit(ctx, codec, store)
    console.print(f"[green]Task deleted:[/green] #{task.id} {escape(task.description)}")


def _save_or_exit(ctx: click.Context, codec: PersistenceCodec, store: TaskStore) -> None:
    """Save the store, exiting with status 1 if the write fails."""
    try:
        codec.save(store)
    except SaveError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(1)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
def init(force: bool) -> None:
    """Write a default config file to .tasklist/config.json."""
    if CONFIG_FILE.exists() and not force:
        console.print(
            "[yellow]tasklist already initialized.[/yellow] "
            f"Edit {CONFIG_FILE} or use --force to reset it."
        )
        return

    TasklistConfig().save()
    console.print(f"[green]Wrote default config to[/green] {CONFIG_FILE}")
