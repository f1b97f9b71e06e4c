"""Display formatting for task output."""

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from tasktrack.core.tasks.models import Task

console = Console()

EMPTY_MESSAGE = "No tasks available."


def numbered(tasks: Sequence[Task]) -> list[tuple[int, Task]]:
    """Pair each task with its 1-based position."""
    return list(enumerate(tasks, start=1))


def render_tasks(entries: Iterable[tuple[int, Task]], title: str | None = None) -> None:
    """
    Print tasks as a numbered list of summary lines.

    Args:
        entries: (1-based number, task) pairs in display order
        title: Optional heading printed above the list
    """
    entries = list(entries)

    if title:
        console.print(f"\n[bold cyan]--- {escape(title)} ---[/bold cyan]")

    if not entries:
        console.print(EMPTY_MESSAGE)
        return

    for number, task in entries:
        style = "dim" if task.completed else ""
        line = f"{number}. {escape(task.summary())}"
        console.print(f"[{style}]{line}[/{style}]" if style else line, soft_wrap=True)
