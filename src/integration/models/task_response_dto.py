import datetime
from dataclasses import dataclass, field

from domain.enums import TaskPriority, TaskStatus
from integration.models.user_dto import UserDto


@dataclass
class TaskResponseDto:
    """Outbound representation of a hydrated task."""

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    author_id: str
    assignee_id: str
    observer_ids: list[str] = field(default_factory=list)
    author: UserDto | None = None
    assignee: UserDto | None = None
    observers: list[UserDto] = field(default_factory=list)
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None
