"""
Unit tests for the Task model and TaskPriority tiers.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from tasktrack.core.tasks.models import Task, TaskPriority


class TestTaskPriority:
    """Test priority tier values and labels."""

    def test_tier_values(self):
        """Test High/Medium/Low map to 1/2/3."""
        assert TaskPriority.HIGH == 1
        assert TaskPriority.MEDIUM == 2
        assert TaskPriority.LOW == 3

    def test_label_for_known_tier(self):
        assert TaskPriority.label_for(1) == "High"
        assert TaskPriority.label_for(3) == "Low"

    def test_label_for_out_of_range_value(self):
        """Test unknown values render as the bare number."""
        assert TaskPriority.label_for(7) == "7"


class TestTaskCreation:
    """Test constructing tasks."""

    def test_new_task_is_pending(self):
        task = Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2)

        assert task.description == "Buy milk"
        assert task.due_date == date(2024, 6, 1)
        assert task.priority == 2
        assert task.completed is False
        assert task.status_label == "Pending"

    def test_out_of_range_priority_is_stored_as_is(self):
        """Test the entity does not enforce the 1-3 range."""
        task = Task(description="Odd", due_date=date(2024, 6, 1), priority=9)
        assert task.priority == 9
        assert task.priority_label == "9"

    def test_missing_due_date_rejected(self):
        with pytest.raises(ValidationError):
            Task(description="No date", priority=1)


class TestTaskMutation:
    """Test setters and completion."""

    def test_fields_replace_unconditionally(self):
        task = Task(description="Old", due_date=date(2024, 6, 1), priority=1)

        task.description = "New"
        task.due_date = date(2025, 1, 1)
        task.priority = 3

        assert task.description == "New"
        assert task.due_date == date(2025, 1, 1)
        assert task.priority == 3

    def test_mark_completed(self):
        task = Task(description="X", due_date=date(2024, 6, 1), priority=1)
        task.mark_completed()
        assert task.completed is True
        assert task.status_label == "Completed"

    def test_mark_completed_is_idempotent(self):
        task = Task(description="X", due_date=date(2024, 6, 1), priority=1)
        task.mark_completed()
        before = task.model_dump()

        task.mark_completed()

        assert task.model_dump() == before

    def test_is_due_on(self):
        task = Task(description="X", due_date=date(2024, 6, 2), priority=3)
        assert task.is_due_on(date(2024, 6, 2)) is True
        assert task.is_due_on(date(2024, 6, 3)) is False

    def test_completed_task_is_never_due(self):
        task = Task(description="Y", due_date=date(2024, 6, 2), priority=1)
        task.mark_completed()
        assert task.is_due_on(date(2024, 6, 2)) is False


class TestTaskSummary:
    """Test the human-readable summary."""

    def test_summary_pending(self):
        task = Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2)
        assert task.summary() == (
            "Task[Description=Buy milk, DueDate=2024-06-01, Priority=2, Status=Pending]"
        )

    def test_summary_completed(self):
        task = Task(description="File taxes", due_date=date(2024, 4, 14), priority=1)
        task.mark_completed()
        assert "Status=Completed" in task.summary()

    def test_str_is_summary(self):
        task = Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2)
        assert str(task) == task.summary()


class TestTaskRecords:
    """Test dict conversion used by the store."""

    def test_to_record(self):
        task = Task(description="Buy milk", due_date=date(2024, 6, 1), priority=2)
        assert task.to_record() == {
            "description": "Buy milk",
            "due_date": "2024-06-01",
            "priority": 2,
            "completed": False,
        }

    def test_from_record(self):
        task = Task.from_record(
            {"description": "Y", "due_date": "2024-06-02", "priority": 1, "completed": True}
        )
        assert task.due_date == date(2024, 6, 2)
        assert task.completed is True

    def test_from_record_rejects_bad_date(self):
        with pytest.raises(ValidationError):
            Task.from_record({"description": "Y", "due_date": "not-a-date", "priority": 1})

    @pytest.mark.parametrize(
        "field,value",
        [
            ("priority", "2"),
            ("priority", 2.0),
            ("priority", True),
            ("completed", "yes"),
            ("completed", 1),
            ("description", 42),
        ],
    )
    def test_from_record_rejects_coercible_values(self, field, value):
        """Test stored values are not silently coerced and rewritten on the next save."""
        record = {"description": "Y", "due_date": "2024-06-02", "priority": 1, "completed": False}
        record[field] = value

        with pytest.raises(ValidationError):
            Task.from_record(record)


class TestPriorityLabel:
    """Test the tier name shown in confirmations."""

    def test_known_tier(self):
        task = Task(description="X", due_date=date(2024, 6, 1), priority=1)
        assert task.priority_label == "High"
