"""
One-shot task commands.

Each command loads the store, performs a single operation, and exits.
Task numbers are 1-based positions in the stored order, the same numbers
`tasktrack list` prints.
"""

from datetime import date
from enum import Enum
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from tasktrack.cli.display import numbered, render_tasks
from tasktrack.cli.errors import (
    ExitCode,
    print_invalid_index_error,
    print_invalid_input_error,
    print_store_write_error,
)
from tasktrack.cli.inputs import InvalidInputError, parse_description, parse_due_date
from tasktrack.core.config.models import TasktrackConfig
from tasktrack.core.tasks.manager import InvalidIndexError, TaskManager
from tasktrack.core.tasks.models import Task
from tasktrack.core.tasks.store import StoreWriteError

console = Console()


class SortField(str, Enum):
    """Orderings offered by `tasktrack list --sort`."""

    PRIORITY = "priority"
    DUE = "due"


def _context(ctx: typer.Context) -> tuple[TaskManager, TasktrackConfig]:
    return ctx.obj["manager"], ctx.obj["config"]


def _parse_fields(description: str, due: str, config: TasktrackConfig) -> tuple[str, date]:
    try:
        return parse_description(description), parse_due_date(due, config.display.date_format)
    except InvalidInputError as e:
        print_invalid_input_error(str(e))
        raise typer.Exit(ExitCode.USER_ERROR)


def _handle_failure(error: Exception) -> NoReturn:
    if isinstance(error, InvalidIndexError):
        print_invalid_index_error(error)
        raise typer.Exit(ExitCode.USER_ERROR)
    if isinstance(error, StoreWriteError):
        print_store_write_error(error)
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    raise error


def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="Task description"),
    due: str = typer.Option(..., "--due", "-d", help="Due date (YYYY-MM-DD by default)"),
    priority: int = typer.Option(
        2,
        "--priority",
        "-p",
        min=1,
        max=3,
        help="Priority: 1 = High, 2 = Medium, 3 = Low",
    ),
) -> None:
    """
    Add a task to the end of the list.

    Examples:
        tasktrack add "Buy milk" --due 2024-06-01 --priority 2
        tasktrack add "File taxes" -d 2024-04-14 -p 1
    """
    manager, config = _context(ctx)
    text, due_date = _parse_fields(description, due, config)

    task = Task(description=text, due_date=due_date, priority=priority)
    try:
        manager.add(task)
    except StoreWriteError as e:
        _handle_failure(e)

    console.print(f"[green]Added:[/green] task {manager.count} ({task.priority_label} priority)")


def update(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Task number (as shown by `tasktrack list`)"),
    description: str = typer.Argument(..., help="New description"),
    due: str = typer.Option(..., "--due", "-d", help="New due date"),
    priority: int = typer.Option(
        ...,
        "--priority",
        "-p",
        min=1,
        max=3,
        help="New priority: 1 = High, 2 = Medium, 3 = Low",
    ),
) -> None:
    """
    Replace a task's description, due date and priority.

    Examples:
        tasktrack update 2 "Buy oat milk" --due 2024-06-02 --priority 3
    """
    manager, config = _context(ctx)
    text, due_date = _parse_fields(description, due, config)

    try:
        task = manager.update(number - 1, text, due_date, priority)
    except (InvalidIndexError, StoreWriteError) as e:
        _handle_failure(e)

    console.print(f"[green]Updated:[/green] task {number} ({task.priority_label} priority)")


def delete(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Task number to delete"),
) -> None:
    """
    Delete a task. Later tasks move up one number.

    Examples:
        tasktrack delete 3
    """
    manager, _ = _context(ctx)

    try:
        task = manager.delete(number - 1)
    except (InvalidIndexError, StoreWriteError) as e:
        _handle_failure(e)

    console.print(f"[green]Deleted:[/green] {escape(task.description)}")


def done(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Task number to mark as completed"),
) -> None:
    """
    Mark a task as completed.

    Examples:
        tasktrack done 1
    """
    manager, _ = _context(ctx)

    try:
        manager.mark_completed(number - 1)
    except (InvalidIndexError, StoreWriteError) as e:
        _handle_failure(e)

    console.print(f"[green]Completed:[/green] task {number}")


def list_tasks(
    ctx: typer.Context,
    sort: SortField | None = typer.Option(
        None,
        "--sort",
        "-s",
        help="Show tasks ordered by priority or due date (the stored order is unchanged)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    List tasks with their numbers.

    Sorting only affects what is shown; each task keeps the number it has
    in the stored order.

    Examples:
        tasktrack list
        tasktrack list --sort priority
        tasktrack list --sort due --json
    """
    manager, config = _context(ctx)

    positions = {id(task): number for number, task in numbered(manager.tasks)}
    if sort == SortField.PRIORITY:
        tasks = manager.list_sorted_by_priority()
    elif sort == SortField.DUE:
        tasks = manager.list_sorted_by_due_date()
    else:
        tasks = manager.tasks

    if not config.display.show_completed:
        tasks = [t for t in tasks if not t.completed]

    if json_output:
        console.print_json(data=[t.to_record() for t in tasks])
        return

    render_tasks([(positions[id(t)], t) for t in tasks])


def due(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Show pending tasks due tomorrow.

    Examples:
        tasktrack due
    """
    manager, _ = _context(ctx)

    positions = {id(task): number for number, task in numbered(manager.tasks)}
    tasks = manager.list_due_within_one_day()

    if json_output:
        console.print_json(data=[t.to_record() for t in tasks])
        return

    render_tasks(
        [(positions[id(t)], t) for t in tasks],
        title="Tasks Due Within a Day",
    )
