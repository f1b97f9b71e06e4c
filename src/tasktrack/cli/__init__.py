"""
tasktrack CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
Running `tasktrack` without a subcommand starts the interactive menu.
"""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from tasktrack import __version__
from tasktrack.cli import menu, task
from tasktrack.cli.errors import ExitCode, print_store_read_error
from tasktrack.core.config import load_config, load_layered_env
from tasktrack.core.tasks.manager import TaskManager

PANEL_INTERACTIVE = "Interactive"
PANEL_TASKS = "Work with Tasks"

app = typer.Typer(
    name="tasktrack",
    help="Personal task tracker with a local JSON store",
    no_args_is_help=False,
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for tasktrack commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tasktrack {__version__}")
        raise typer.Exit(ExitCode.SUCCESS)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Path to the task store (default: ~/.tasktrack/tasks.json or TASKTRACK_STORE)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    tasktrack - Personal Task Tracker.

    Create, edit, delete, complete, sort and filter tasks. Every change
    is saved to the store immediately.

    Quick Start:
        tasktrack                                   # Interactive menu
        tasktrack add "Buy milk" --due 2024-06-01   # Add a task
        tasktrack list --sort priority              # Show tasks by priority
        tasktrack done 1                            # Complete task 1
    """
    setup_logging(debug)

    # TASKTRACK_* only; OS env > .env.local > .env > user .env
    load_layered_env()
    config = load_config()

    store_path = store.expanduser() if store else config.store.path
    manager = TaskManager(store_path)
    manager.initialize()
    if manager.load_error is not None:
        print_store_read_error(manager.load_error)

    ctx.obj = {"manager": manager, "config": config, "debug": debug}

    if ctx.invoked_subcommand is not None:
        return

    menu.run_menu(manager, config.display.date_format)


@app.command(name="menu", rich_help_panel=PANEL_INTERACTIVE)
def menu_command(ctx: typer.Context) -> None:
    """
    Start the interactive menu.

    The menu offers add, update, delete, complete, display, sort and
    due-tomorrow views until you choose Exit.
    """
    menu.run_menu(ctx.obj["manager"], ctx.obj["config"].display.date_format)


app.command(name="add", rich_help_panel=PANEL_TASKS)(task.add)
app.command(name="update", rich_help_panel=PANEL_TASKS)(task.update)
app.command(name="delete", rich_help_panel=PANEL_TASKS)(task.delete)
app.command(name="done", rich_help_panel=PANEL_TASKS)(task.done)
app.command(name="list", rich_help_panel=PANEL_TASKS)(task.list_tasks)
app.command(name="due", rich_help_panel=PANEL_TASKS)(task.due)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
