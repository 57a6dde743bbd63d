"""Update task command with handler."""

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Awaitable

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from application.services import TaskOrchestrationBase, gather_all
from domain.enums import TaskPriority, TaskStatus
from domain.exceptions import EntityKind, EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_response_dto import TaskResponseDto
from observability import task_processing_time, tasks_failed, tasks_updated

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class UpdateTaskCommand(Command[OperationResult[TaskResponseDto]]):
    """Command to update an existing task.

    Fields left to None are not touched: omitted references are neither
    looked up nor overwritten.
    """

    task_id: str
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    author_id: str | None = None
    assignee_id: str | None = None


class UpdateTaskCommandHandler(
    TaskOrchestrationBase,
    CommandHandler[UpdateTaskCommand, OperationResult[TaskResponseDto]],
):
    """Handle task updates."""

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: UpdateTaskCommand) -> OperationResult[TaskResponseDto]:
        command = request
        start_time = time.time()

        add_span_attributes(
            {
                "task.id": command.task_id,
                "task.fields_updated": sum(
                    [
                        command.title is not None,
                        command.description is not None,
                        command.status is not None,
                        command.priority is not None,
                        command.author_id is not None,
                        command.assignee_id is not None,
                    ]
                ),
            }
        )

        new_status: TaskStatus | None = None
        if command.status is not None:
            try:
                new_status = TaskStatus(command.status)
            except ValueError:
                tasks_failed.add(1, {"reason": "invalid_status", "operation": "update"})
                return self.bad_request("Invalid task status supplied")

        new_priority: TaskPriority | None = None
        if command.priority is not None:
            try:
                new_priority = TaskPriority(command.priority)
            except ValueError:
                tasks_failed.add(1, {"reason": "invalid_priority", "operation": "update"})
                return self.bad_request("Invalid task priority supplied")

        context = "when updating task"
        lookups: dict[str, Awaitable[Any]] = {"task": self.resolver.resolve_task_async(command.task_id, "when updating")}
        if command.author_id is not None:
            lookups["author"] = self.resolver.resolve_user_async(command.author_id, EntityKind.AUTHOR, context)
        if command.assignee_id is not None:
            lookups["assignee"] = self.resolver.resolve_user_async(command.assignee_id, EntityKind.ASSIGNEE, context)

        try:
            with tracer.start_as_current_span("resolve_task_references"):
                resolved = dict(zip(lookups, await gather_all(*lookups.values())))

            task = resolved["task"]
            with tracer.start_as_current_span("update_task_fields") as span:
                fields_changed = []
                if "author" in resolved:
                    task.author_id = resolved["author"].id
                    fields_changed.append("author")
                if "assignee" in resolved:
                    task.assignee_id = resolved["assignee"].id
                    fields_changed.append("assignee")
                if command.title is not None:
                    task.title = command.title
                    fields_changed.append("title")
                if command.description is not None:
                    task.description = command.description
                    fields_changed.append("description")
                if new_status is not None:
                    task.status = new_status
                    fields_changed.append("status")
                if new_priority is not None:
                    task.priority = new_priority
                    fields_changed.append("priority")
                task.updated_at = datetime.now(UTC)
                span.set_attribute("task.fields_changed", ",".join(fields_changed))

            updated_task = await self.task_repository.update_async(task)
            log.info(f"Task '{updated_task.id}' updated: {fields_changed}")

            response = await self.respond_async(updated_task)
        except EntityNotFoundError as e:
            tasks_failed.add(1, {"reason": "not_found", "operation": "update"})
            return self.entity_not_found(e)

        processing_time_ms = (time.time() - start_time) * 1000
        tasks_updated.add(1, {"fields_count": len(fields_changed)})
        task_processing_time.record(processing_time_ms, {"operation": "update", "fields_count": len(fields_changed)})

        return self.ok(response)
