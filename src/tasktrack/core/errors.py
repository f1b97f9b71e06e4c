"""Base exception for tasktrack errors."""


class TasktrackError(Exception):
    """Base class for all tasktrack errors."""

    pass
