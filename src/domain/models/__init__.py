"""Domain models package."""

from .hydrated_task import HydratedTask

__all__ = [
    "HydratedTask",
]
