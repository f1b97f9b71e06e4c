"""
Task models, persistence and the task manager.

This module provides the Task model and priority tiers, the JSON store
that persists the task collection, and the TaskManager that owns the
collection and exposes CRUD, sort and filter operations.
"""

from .manager import InvalidIndexError, TaskManager
from .models import Task, TaskPriority
from .store import JsonTaskStore, StoreReadError, StoreWriteError

__all__ = [
    # Models
    "Task",
    "TaskPriority",
    # Persistence
    "JsonTaskStore",
    "StoreReadError",
    "StoreWriteError",
    # Manager
    "TaskManager",
    "InvalidIndexError",
]
