"""Task-related enumerations.

These enums are persisted on the task record for status and priority tracking.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Status values for a Task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Priority levels for a Task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
