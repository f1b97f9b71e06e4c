"""
Task data models for tasktrack.

Defines the Task model (one to-do item) and the TaskPriority tiers.
Tasks are plain mutable records; the owning TaskManager decides when
changes are persisted.
"""

from datetime import date
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskPriority(IntEnum):
    """Priority tiers (lower value is more urgent)."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @classmethod
    def label_for(cls, value: int) -> str:
        """
        Render a priority value for display.

        Known tiers render as their name ("High"), anything else as the
        bare number since the model stores out-of-range values as given.
        """
        try:
            return cls(value).name.capitalize()
        except ValueError:
            return str(value)


class Task(BaseModel):
    """
    A single to-do item.

    The entity performs no range validation on priority: values outside
    1-3 are stored as-is. Completion is one-way; there is no way back to
    pending.

    Example:
        >>> task = Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2)
        >>> task.completed
        False
        >>> task.mark_completed()
        >>> task.summary()
        'Task[Description=Buy milk, DueDate=2024-06-01, Priority=2, Status=Completed]'
    """

    description: str = Field(..., strict=True, description="Free-form task text")
    due_date: date = Field(..., description="Calendar due date (no time of day)")
    priority: int = Field(..., strict=True, description="1 = High, 2 = Medium, 3 = Low")
    completed: bool = Field(default=False, strict=True, description="Whether the task is done")

    model_config = ConfigDict(
        # Setters replace fields unconditionally; keep assignment unvalidated.
        validate_assignment=False,
    )

    @property
    def status_label(self) -> str:
        """Status as shown to the user."""
        return "Completed" if self.completed else "Pending"

    @property
    def priority_label(self) -> str:
        """Priority tier name ("High", "Medium", "Low") for messages."""
        return TaskPriority.label_for(self.priority)

    def mark_completed(self) -> None:
        """Mark the task as completed. Calling it again has no effect."""
        self.completed = True

    def is_due_on(self, day: date) -> bool:
        """Return True if the task is still pending and due exactly on ``day``."""
        return not self.completed and self.due_date == day

    def summary(self) -> str:
        """Human-readable one-line summary containing all four fields."""
        return (
            f"Task[Description={self.description}, "
            f"DueDate={self.due_date.isoformat()}, "
            f"Priority={self.priority}, "
            f"Status={self.status_label}]"
        )

    def to_record(self) -> dict[str, Any]:
        """
        Convert the task to a JSON-safe dict.

        Returns:
            Dict with ISO-formatted due date, suitable for json.dump
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Task":
        """
        Build a Task from a dict produced by :meth:`to_record`.

        Raises:
            pydantic.ValidationError: If the record is missing fields or
                holds values of the wrong type
        """
        return cls.model_validate(record)

    def __str__(self) -> str:
        return self.summary()
