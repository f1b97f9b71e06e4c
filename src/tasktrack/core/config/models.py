"""
Configuration data models for tasktrack.

These models define the structure of .tasktrack.json and
~/.config/tasktrack/config.json files, with validation via Pydantic.
"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_store_path() -> Path:
    """Default store location: ~/.tasktrack/tasks.json."""
    return Path.home() / ".tasktrack" / "tasks.json"


class StoreConfig(BaseModel):
    """
    Where the task collection is persisted.
    """
    path: Path = Field(
        default_factory=default_store_path,
        description="Path to the JSON task store"
    )

    @field_validator("path", mode="after")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Expand ~ in configured paths."""
        return v.expanduser()


class DisplayConfig(BaseModel):
    """
    How the CLI reads and shows tasks.
    """
    date_format: str = Field(
        default="%Y-%m-%d",
        min_length=1,
        description="strftime/strptime pattern for due dates entered at the prompt"
    )
    show_completed: bool = Field(
        default=True,
        description="Include completed tasks in `tasktrack list`"
    )

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Reject patterns that cannot round-trip a date."""
        sample = datetime(2024, 11, 23)
        try:
            parsed = datetime.strptime(sample.strftime(v), v)
        except ValueError as e:
            raise ValueError(f"Unusable date format '{v}': {e}") from e
        if parsed.date() != sample.date():
            raise ValueError(f"Date format '{v}' must include year, month and day")
        return v


class TasktrackConfig(BaseModel):
    """
    Top-level tasktrack configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = TasktrackConfig(store=StoreConfig(path=Path("tasks.json")))
        >>> config.display.date_format
        '%Y-%m-%d'
    """
    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Task store settings"
    )
    display: DisplayConfig = Field(
        default_factory=DisplayConfig,
        description="CLI input and output settings"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,
    )
