"""
Parsing and validation of values typed by the user.

The core accepts any description, date and priority; these helpers are
where the CLI enforces non-empty descriptions, parseable dates and the
1-3 priority range.
"""

from datetime import date, datetime

from tasktrack.core.errors import TasktrackError
from tasktrack.core.tasks.models import TaskPriority

PRIORITY_PROMPT = "1-High, 2-Medium, 3-Low"


class InvalidInputError(TasktrackError):
    """Raised when typed input cannot be turned into a task field."""

    pass


def parse_description(value: str) -> str:
    """Strip a description and reject empty ones."""
    description = value.strip()
    if not description:
        raise InvalidInputError("Description cannot be empty")
    return description


def parse_due_date(value: str, date_format: str = "%Y-%m-%d") -> date:
    """
    Parse a due date.

    Args:
        value: Text typed by the user
        date_format: strptime pattern from the display config

    Raises:
        InvalidInputError: If the text does not match the format
    """
    text = value.strip()
    try:
        return datetime.strptime(text, date_format).date()
    except ValueError:
        example = date(2024, 6, 1).strftime(date_format)
        raise InvalidInputError(
            f"Invalid date '{text}'. Use {date_format} (e.g. {example})"
        ) from None


def parse_priority(value: str) -> int:
    """
    Parse a priority tier.

    Raises:
        InvalidInputError: If the text is not an integer between 1 and 3
    """
    text = value.strip()
    try:
        priority = int(text)
    except ValueError:
        raise InvalidInputError(f"Priority must be a number ({PRIORITY_PROMPT})") from None
    if priority not in {p.value for p in TaskPriority}:
        raise InvalidInputError(f"Priority must be 1, 2 or 3 ({PRIORITY_PROMPT}), got {priority}")
    return priority


def parse_task_number(value: str) -> int:
    """
    Parse a 1-based task number and return the 0-based index.

    Range checking is left to the task manager.

    Raises:
        InvalidInputError: If the text is not an integer
    """
    text = value.strip()
    try:
        return int(text) - 1
    except ValueError:
        raise InvalidInputError(f"Task number must be a whole number, got '{text}'") from None
