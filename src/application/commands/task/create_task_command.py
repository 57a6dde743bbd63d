"""Create task command with handler."""

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from application.services import TaskOrchestrationBase, gather_all
from domain.enums import TaskPriority, TaskStatus
from domain.exceptions import EntityKind, EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_dto import TaskDto
from integration.models.task_response_dto import TaskResponseDto
from observability import task_processing_time, tasks_created, tasks_failed

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class CreateTaskCommand(Command[OperationResult[TaskResponseDto]]):
    """Command to create a new task."""

    title: str
    author_id: str
    assignee_id: str
    description: str = ""
    status: str = "pending"
    priority: str = "medium"


class CreateTaskCommandHandler(
    TaskOrchestrationBase,
    CommandHandler[CreateTaskCommand, OperationResult[TaskResponseDto]],
):
    """Handle task creation.

    Author and assignee are resolved concurrently; the task is persisted
    only once both exist, then hydrated from the persisted record.
    """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: CreateTaskCommand) -> OperationResult[TaskResponseDto]:
        command = request
        start_time = time.time()

        add_span_attributes(
            {
                "task.title": command.title,
                "task.author_id": command.author_id,
                "task.assignee_id": command.assignee_id,
            }
        )

        # Convert string values to enums
        try:
            status = TaskStatus(command.status)
        except ValueError:
            status = TaskStatus.PENDING

        try:
            priority = TaskPriority(command.priority)
        except ValueError:
            priority = TaskPriority.MEDIUM

        try:
            with tracer.start_as_current_span("resolve_task_references"):
                author, assignee = await gather_all(
                    self.resolver.resolve_user_async(command.author_id, EntityKind.AUTHOR, "when creating task"),
                    self.resolver.resolve_user_async(command.assignee_id, EntityKind.ASSIGNEE, "when creating task"),
                )

            now = datetime.now(UTC)
            task = TaskDto(
                id=str(uuid4()),
                title=command.title,
                description=command.description,
                author_id=author.id,
                assignee_id=assignee.id,
                status=status,
                priority=priority,
                observer_ids=[],
                created_at=now,
                updated_at=now,
            )
            saved_task = await self.task_repository.add_async(task)
            log.info(f"Task '{saved_task.id}' created by '{author.id}' for '{assignee.id}'")

            response = await self.respond_async(saved_task)
        except EntityNotFoundError as e:
            tasks_failed.add(1, {"reason": "not_found", "operation": "create"})
            return self.entity_not_found(e)

        processing_time_ms = (time.time() - start_time) * 1000
        tasks_created.add(1, {"priority": priority.value, "status": status.value})
        task_processing_time.record(processing_time_ms, {"operation": "create", "priority": priority.value})

        return self.ok(response)
