"""Delete task command with handler."""

import logging
import time
from dataclasses import dataclass
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from application.services import TaskOrchestrationBase
from domain.exceptions import EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from observability import task_processing_time, tasks_deleted, tasks_failed

log = logging.getLogger(__name__)


@dataclass
class DeleteTaskCommand(Command[OperationResult[dict[str, Any]]]):
    """Command to delete an existing task."""

    task_id: str


class DeleteTaskCommandHandler(
    TaskOrchestrationBase,
    CommandHandler[DeleteTaskCommand, OperationResult[dict[str, Any]]],
):
    """Handle task deletion. Referenced users are never deleted."""

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: DeleteTaskCommand) -> OperationResult[dict[str, Any]]:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id})

        try:
            task = await self.resolver.resolve_task_async(command.task_id, "when deleting")
        except EntityNotFoundError as e:
            tasks_failed.add(1, {"reason": "not_found", "operation": "delete"})
            return self.entity_not_found(e)

        await self.task_repository.remove_async(task.id)
        log.info(f"Task '{task.id}' deleted")

        processing_time_ms = (time.time() - start_time) * 1000
        tasks_deleted.add(1)
        task_processing_time.record(processing_time_ms, {"operation": "delete", "priority": task.priority})

        return self.ok(
            {
                "id": task.id,
                "title": task.title,
                "message": "Task deleted successfully",
            }
        )
