"""Integration event package exports."""

from .task_events import TaskCreationRequestedIntegrationEventV1
from .task_events_handler import TaskCreationRequestedIntegrationEventV1Handler

__all__ = [
    "TaskCreationRequestedIntegrationEventV1",
    "TaskCreationRequestedIntegrationEventV1Handler",
]
