"""Observability utilities and metrics."""

from .metrics import task_observers_changed, task_processing_time, tasks_created, tasks_deleted, tasks_failed, tasks_updated, users_created

__all__ = [
    # Task metrics
    "tasks_created",
    "tasks_updated",
    "tasks_deleted",
    "tasks_failed",
    "task_observers_changed",
    "task_processing_time",
    # User metrics
    "users_created",
]
