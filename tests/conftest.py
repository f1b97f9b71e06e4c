"""
Pytest configuration and shared fixtures.

Provides fixtures for an isolated environment (HOME, XDG config and
working directory in a temp dir), store paths, sample tasks and a
fixed-date task manager.
"""

import json
from datetime import date
from pathlib import Path

import pytest

from tasktrack.core.config import clear_cache
from tasktrack.core.tasks.manager import TaskManager
from tasktrack.core.tasks.models import Task

# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Keep every test away from the real home directory and config.

    Points HOME and XDG_CONFIG_HOME into the temp dir, runs the test from
    a clean working directory and resets the config cache.
    """
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    # setenv first so teardown also removes values written by .env loading
    monkeypatch.setenv("TASKTRACK_STORE", "")
    monkeypatch.delenv("TASKTRACK_STORE")
    monkeypatch.chdir(workdir)

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def store_path(tmp_path) -> Path:
    """Provide a store path inside a not-yet-created directory."""
    return tmp_path / "data" / "tasks.json"


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def today() -> date:
    """Fixed 'current date' used by due-date tests."""
    return date(2024, 6, 1)


@pytest.fixture
def manager(store_path, today) -> TaskManager:
    """Provide an initialized, empty TaskManager with a fixed clock."""
    task_manager = TaskManager(store_path, today=lambda: today)
    task_manager.initialize()
    return task_manager


@pytest.fixture
def sample_tasks() -> list[Task]:
    """Provide tasks with mixed priorities, dates and states."""
    done = Task(description="Renew passport", due_date=date(2024, 6, 2), priority=1)
    done.mark_completed()
    return [
        Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2),
        Task(description="File taxes", due_date=date(2024, 4, 14), priority=1),
        Task(description="Call plumber", due_date=date(2024, 6, 2), priority=3),
        done,
        Task(description="Book dentist", due_date=date(2024, 5, 20), priority=2),
    ]


@pytest.fixture
def write_store(store_path):
    """Return a helper that writes raw content to the store path."""

    def _write(content) -> Path:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            store_path.write_text(content, encoding="utf-8")
        else:
            store_path.write_text(json.dumps(content), encoding="utf-8")
        return store_path

    return _write
