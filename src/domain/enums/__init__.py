"""Domain enumerations package."""

from .task import TaskPriority, TaskStatus

__all__ = [
    "TaskStatus",
    "TaskPriority",
]
