"""
Interactive menu loop.

Runs the numbered menu until the user chooses Exit (or closes input).
Every change is saved by the task manager as it happens, so leaving the
loop needs no extra flush. Errors are reported and the loop continues.
"""

from collections.abc import Callable
from datetime import date
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from tasktrack.cli.display import numbered, render_tasks
from tasktrack.cli.errors import (
    print_invalid_index_error,
    print_invalid_input_error,
    print_store_write_error,
)
from tasktrack.cli.inputs import (
    PRIORITY_PROMPT,
    InvalidInputError,
    parse_description,
    parse_due_date,
    parse_priority,
    parse_task_number,
)
from tasktrack.core.tasks.manager import InvalidIndexError, TaskManager
from tasktrack.core.tasks.models import Task
from tasktrack.core.tasks.store import StoreWriteError

console = Console()

T = TypeVar("T")

MENU_TITLE = "Task Management System"
MENU_OPTIONS: tuple[tuple[str, str], ...] = (
    ("1", "Add Task"),
    ("2", "Update Task"),
    ("3", "Delete Task"),
    ("4", "Mark Task as Completed"),
    ("5", "Display Tasks"),
    ("6", "Sort Tasks by Priority"),
    ("7", "Sort Tasks by Due Date"),
    ("8", "View Tasks Due Within a Day"),
    ("9", "Exit"),
)
EXIT_CHOICE = "9"
GOODBYE = "Exiting Task Management System. Goodbye!"


def _prompt_until_valid(text: str, parse: Callable[[str], T]) -> T:
    """Prompt until ``parse`` accepts the answer, reporting each rejection."""
    while True:
        raw = typer.prompt(text, default="", show_default=False)
        try:
            return parse(raw)
        except InvalidInputError as e:
            print_invalid_input_error(str(e))


class MenuSession:
    """One run of the interactive menu against a task manager."""

    def __init__(self, manager: TaskManager, date_format: str = "%Y-%m-%d"):
        self.manager = manager
        self.date_format = date_format
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.update_task,
            "3": self.delete_task,
            "4": self.complete_task,
            "5": self.display_tasks,
            "6": self.sort_by_priority,
            "7": self.sort_by_due_date,
            "8": self.due_within_a_day,
        }

    def run(self) -> None:
        """Main loop; returns when the user exits or input ends."""
        while True:
            self._print_menu()
            try:
                choice = typer.prompt("Enter your choice", default="", show_default=False)
                choice = choice.strip()
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice)
                if action is None:
                    console.print("[yellow]Invalid choice. Please try again.[/yellow]")
                    continue
                self._run_action(action)
            except typer.Abort:
                console.print()
                break
        console.print(GOODBYE)

    def _print_menu(self) -> None:
        console.print(f"\n[bold]--- {MENU_TITLE} ---[/bold]")
        for key, label in MENU_OPTIONS:
            console.print(f"{key}. {label}")

    def _run_action(self, action: Callable[[], None]) -> None:
        try:
            action()
        except InvalidIndexError as e:
            print_invalid_index_error(e)
        except StoreWriteError as e:
            print_store_write_error(e)

    # ------------------------------------------------------------------
    # Field prompts
    # ------------------------------------------------------------------

    def _prompt_fields(self, new: bool) -> tuple[str, date, int]:
        lead = "Enter" if new else "Enter new"
        description = _prompt_until_valid(f"{lead} task description", parse_description)
        due_date = _prompt_until_valid(
            f"{lead} due date ({self.date_format})",
            lambda raw: parse_due_date(raw, self.date_format),
        )
        priority = _prompt_until_valid(f"{lead} priority ({PRIORITY_PROMPT})", parse_priority)
        return description, due_date, priority

    def _prompt_index(self, verb: str) -> int:
        return _prompt_until_valid(f"Enter task number to {verb}", parse_task_number)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_task(self) -> None:
        description, due_date, priority = self._prompt_fields(new=True)
        task = Task(description=description, due_date=due_date, priority=priority)
        self.manager.add(task)
        console.print(
            f"[green]Added:[/green] task {self.manager.count} ({task.priority_label} priority)"
        )

    def update_task(self) -> None:
        self.display_tasks()
        index = self._prompt_index("update")
        # Reject a bad number before asking for the new field values
        self.manager.get(index)
        description, due_date, priority = self._prompt_fields(new=False)
        task = self.manager.update(index, description, due_date, priority)
        console.print(f"[green]Updated:[/green] task {index + 1} ({task.priority_label} priority)")

    def delete_task(self) -> None:
        self.display_tasks()
        index = self._prompt_index("delete")
        task = self.manager.delete(index)
        console.print(f"[green]Deleted:[/green] {escape(task.description)}")

    def complete_task(self) -> None:
        self.display_tasks()
        index = self._prompt_index("mark as completed")
        self.manager.mark_completed(index)
        console.print(f"[green]Completed:[/green] task {index + 1}")

    def display_tasks(self) -> None:
        render_tasks(numbered(self.manager.tasks))

    def sort_by_priority(self) -> None:
        render_tasks(
            numbered(self.manager.list_sorted_by_priority()),
            title="Tasks Sorted by Priority",
        )

    def sort_by_due_date(self) -> None:
        render_tasks(
            numbered(self.manager.list_sorted_by_due_date()),
            title="Tasks Sorted by Due Date",
        )

    def due_within_a_day(self) -> None:
        positions = {id(task): number for number, task in numbered(self.manager.tasks)}
        due = self.manager.list_due_within_one_day()
        render_tasks(
            [(positions[id(task)], task) for task in due],
            title="Tasks Due Within a Day",
        )


def run_menu(manager: TaskManager, date_format: str = "%Y-%m-%d") -> None:
    """Run the interactive menu until the user exits."""
    MenuSession(manager, date_format).run()
