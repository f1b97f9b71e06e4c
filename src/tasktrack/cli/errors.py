"""
Standardized error handling and exit codes for the tasktrack CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

from tasktrack.core.tasks.manager import InvalidIndexError
from tasktrack.core.tasks.store import StoreReadError, StoreWriteError

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for tasktrack CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, e.g. the store could not be written."""

    USER_ERROR = 2
    """Invalid input or task number (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid task number: 5",
        ...     reason="There are 2 task(s)",
        ...     solution="tasktrack list  # to see task numbers",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_invalid_index_error(error: InvalidIndexError) -> None:
    """Print error for a task number outside the list (shown 1-based)."""
    if error.count:
        reason = f"Task numbers run from 1 to {error.count}"
    else:
        reason = "There are no tasks yet"
    print_error(
        f"Invalid task number: {error.index + 1}",
        reason=reason,
        solution="tasktrack list  # to see task numbers",
    )


def print_invalid_input_error(message: str) -> None:
    """Print error for a value the user typed that cannot be used."""
    print_error(f"Invalid input: {message}")


def print_store_read_error(error: StoreReadError) -> None:
    """Print error when the store exists but could not be loaded."""
    print_error(
        "Error loading tasks",
        reason=f"{error}. Starting with an empty task list; the next change overwrites the file",
        solution="Restore the store from a backup before making changes",
    )


def print_store_write_error(error: StoreWriteError) -> None:
    """Print error when the store could not be saved."""
    print_error(
        "Error saving tasks",
        reason=f"{error}. The change is kept in memory only",
        solution="Check permissions and free space for the store location",
    )
