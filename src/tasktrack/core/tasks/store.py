"""
JSON file store for the task collection.

The whole ordered collection lives in a single JSON document that is
read in full at startup and rewritten in full after every change:

    {
        "version": 1,
        "tasks": [
            {
                "description": "Buy milk",
                "due_date": "2024-06-01",
                "priority": 2,
                "completed": false
            }
        ]
    }

Writes go through a temporary file and an atomic rename so a failed
write never truncates the existing store.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tasktrack.core.errors import TasktrackError

from .models import Task

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class StoreReadError(TasktrackError):
    """Raised when the store exists but cannot be read or parsed."""

    pass


class StoreWriteError(TasktrackError):
    """Raised when the store cannot be written."""

    pass


class JsonTaskStore:
    """
    Reads and writes the task collection as one JSON file.

    Example:
        >>> store = JsonTaskStore(Path("tasks.json"))
        >>> store.save([Task(description="X", due_date=date(2024, 6, 2), priority=3)])
        >>> [t.description for t in store.load()]
        ['X']
    """

    def __init__(self, path: Path | str):
        """
        Initialize the store.

        Args:
            path: Location of the JSON store file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[Task]:
        """
        Load the full task collection.

        Returns:
            Tasks in stored order (empty if the file does not exist)

        Raises:
            StoreReadError: If the file cannot be read or its contents are
                not a valid task collection
        """
        if not self.path.exists():
            logger.debug(f"No store at {self.path}, starting empty")
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreReadError(f"Failed to parse {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(f"Failed to read {self.path}: {e}") from e

        return self._decode(data)

    def save(self, tasks: list[Task]) -> None:
        """
        Save the full task collection atomically.

        Args:
            tasks: Complete ordered collection to persist

        Raises:
            StoreWriteError: If the directory or file cannot be written, or a
                description cannot be encoded as UTF-8
        """
        data = self._encode(tasks)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=".tasks_", suffix=".json.tmp"
            )
        except OSError as e:
            raise StoreWriteError(f"Failed to write {self.path}: {e}") from e

        replaced = False
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")

            os.replace(temp_path, self.path)
            replaced = True
        # UnicodeEncodeError (a ValueError) comes from undecodable argv bytes
        except (OSError, ValueError) as e:
            raise StoreWriteError(f"Failed to write {self.path}: {e}") from e
        finally:
            if not replaced:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass

        logger.debug(f"Saved {len(tasks)} task(s) to {self.path}")

    def _encode(self, tasks: list[Task]) -> dict[str, Any]:
        return {
            "version": STORE_VERSION,
            "tasks": [task.to_record() for task in tasks],
        }

    def _decode(self, data: Any) -> list[Task]:
        """
        Validate the parsed document and build Task objects.

        Any malformed record rejects the whole file; there is no partial
        recovery.
        """
        if not isinstance(data, dict):
            raise StoreReadError(f"{self.path} must contain a JSON object")

        version = data.get("version", STORE_VERSION)
        if isinstance(version, bool) or not isinstance(version, int):
            raise StoreReadError(f"'version' in {self.path} must be an integer, got {version!r}")

        if "tasks" not in data:
            raise StoreReadError(f"{self.path} has no 'tasks' list")
        raw_tasks = data["tasks"]
        if not isinstance(raw_tasks, list):
            raise StoreReadError(f"'tasks' in {self.path} must be a list")

        tasks = []
        for position, raw_task in enumerate(raw_tasks):
            if not isinstance(raw_task, dict):
                raise StoreReadError(f"Task #{position + 1} in {self.path} is not an object")
            try:
                tasks.append(Task.from_record(raw_task))
            except ValidationError as e:
                raise StoreReadError(
                    f"Task #{position + 1} in {self.path} is invalid: {e}"
                ) from e

        return tasks
