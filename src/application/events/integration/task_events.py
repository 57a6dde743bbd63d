from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from neuroglia.eventing.cloud_events.decorators import cloudevent
from neuroglia.integration.models import IntegrationEvent

from domain.enums import TaskPriority, TaskStatus


@cloudevent("io.tasktracker.task.creation.requested.v1")
@dataclass
class TaskCreationRequestedIntegrationEventV1(IntegrationEvent[str]):
    """Incoming CloudEvent"""

    aggregate_id: str
    created_at: datetime
    author_id: str = ""
    assignee_id: str = ""
    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
