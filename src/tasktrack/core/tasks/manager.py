"""
Task manager: the in-memory task collection plus its persistence.

The manager owns an ordered list of tasks. Tasks are addressed by their
position in that list (0-based), so deleting or sorting changes which
task a given index refers to. Every mutating operation rewrites the whole
store before returning; sorting and filtering never write.
"""

import logging
from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path

from tasktrack.core.errors import TasktrackError

from .models import Task
from .store import JsonTaskStore, StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class InvalidIndexError(TasktrackError):
    """Raised when a task index is outside the collection."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Invalid task index {index} (have {count} task(s))")


class TaskManager:
    """
    CRUD and query operations over the task collection.

    Invalid indices raise InvalidIndexError before anything is touched.
    A failed save raises StoreWriteError after the in-memory change has
    been applied; the change is not rolled back, so memory and disk can
    diverge until the next successful save.

    Example:
        >>> manager = TaskManager(Path("tasks.json"))
        >>> manager.initialize()
        []
        >>> manager.add(Task(description="File taxes", due_date=date(2024, 4, 14), priority=1))
        >>> manager.count
        1
    """

    def __init__(
        self,
        store: JsonTaskStore | Path | str,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize the manager. Call :meth:`initialize` to load tasks.

        Args:
            store: Store instance, or path to the JSON store file
            today: Returns the current date (used by due-date queries)
        """
        if isinstance(store, JsonTaskStore):
            self.store = store
        else:
            self.store = JsonTaskStore(store)
        self._today = today
        self._tasks: list[Task] = []
        self.load_error: StoreReadError | None = None

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------

    def initialize(self) -> list[Task]:
        """
        Load the collection from the store.

        A missing store yields an empty collection. A corrupt store is
        logged, kept on ``load_error`` and also yields an empty collection.

        Returns:
            The loaded tasks
        """
        self.load_error = None
        try:
            self._tasks = self.store.load()
        except StoreReadError as e:
            logger.warning(f"Error loading tasks: {e}")
            self.load_error = e
            self._tasks = []
        else:
            logger.debug(f"Loaded {len(self._tasks)} task(s) from {self.store.path}")
        return self.tasks

    def _save(self) -> None:
        try:
            self.store.save(self._tasks)
        except StoreWriteError as e:
            logger.warning(f"Error saving tasks: {e}")
            raise

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the collection in its current order."""
        return list(self._tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_valid_index(self, index: int) -> bool:
        """Return True if ``0 <= index < count``."""
        return 0 <= index < len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not self.is_valid_index(index):
            logger.debug(f"Rejected index {index} for {len(self._tasks)} task(s)")
            raise InvalidIndexError(index, len(self._tasks))

    def get(self, index: int) -> Task:
        """
        Get the task at ``index``.

        Raises:
            InvalidIndexError: If the index is out of range
        """
        self._check_index(index)
        return self._tasks[index]

    def list_sorted_by_priority(self) -> list[Task]:
        """
        Reorder the collection by ascending priority (1 first).

        The sort is stable and happens in place. It is not persisted.

        Returns:
            The reordered collection
        """
        self._tasks.sort(key=lambda t: t.priority)
        return self.tasks

    def list_sorted_by_due_date(self) -> list[Task]:
        """Reorder the collection by ascending due date (stable, in place, not persisted)."""
        self._tasks.sort(key=lambda t: t.due_date)
        return self.tasks

    def list_due_within_one_day(self) -> list[Task]:
        """
        Pending tasks due exactly tomorrow.

        Collection order is left untouched. Completed tasks are excluded
        even when due tomorrow.
        """
        tomorrow = self._today() + timedelta(days=1)
        return [task for task in self._tasks if task.is_due_on(tomorrow)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, task: Task) -> None:
        """
        Append a task to the end of the collection and persist.

        Raises:
            StoreWriteError: If the save fails (the task stays added)
        """
        self._tasks.append(task)
        logger.debug(f"Added task at index {len(self._tasks) - 1}: {task.description}")
        self._save()

    def update(self, index: int, description: str, due_date: date, priority: int) -> Task:
        """
        Replace the description, due date and priority of a task and persist.

        Args:
            index: 0-based task position
            description: New description
            due_date: New due date
            priority: New priority (stored as given)

        Returns:
            The updated task

        Raises:
            InvalidIndexError: If the index is out of range (nothing changes)
            StoreWriteError: If the save fails (the update stays applied)
        """
        self._check_index(index)
        task = self._tasks[index]
        task.description = description
        task.due_date = due_date
        task.priority = priority
        logger.debug(f"Updated task at index {index}")
        self._save()
        return task

    def delete(self, index: int) -> Task:
        """
        Remove a task and persist. Later tasks shift down by one.

        Returns:
            The removed task

        Raises:
            InvalidIndexError: If the index is out of range (nothing changes)
            StoreWriteError: If the save fails (the task stays removed)
        """
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug(f"Deleted task at index {index}: {task.description}")
        self._save()
        return task

    def mark_completed(self, index: int) -> Task:
        """
        Mark a task as completed and persist.

        Completing an already completed task leaves it completed (the
        store is still rewritten).

        Returns:
            The completed task

        Raises:
            InvalidIndexError: If the index is out of range (nothing changes)
            StoreWriteError: If the save fails (the task stays completed)
        """
        self._check_index(index)
        task = self._tasks[index]
        task.mark_completed()
        logger.debug(f"Completed task at index {index}")
        self._save()
        return task
