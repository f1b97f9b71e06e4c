"""
tasktrack - Personal Task Tracker

A console program for creating, editing, completing, sorting and
filtering personal to-do items stored in a local JSON file.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from tasktrack.core.config.models import TasktrackConfig
from tasktrack.core.tasks.manager import TaskManager
from tasktrack.core.tasks.models import Task, TaskPriority

__all__ = ["TasktrackConfig", "Task", "TaskPriority", "TaskManager", "__version__"]
