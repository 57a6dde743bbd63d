"""Remove task observer command with handler."""

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from application.services import TaskOrchestrationBase, gather_all
from domain.exceptions import EntityKind, EntityNotFoundError, ObserverNotInTaskError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_response_dto import TaskResponseDto
from observability import task_observers_changed, task_processing_time, tasks_failed

log = logging.getLogger(__name__)


@dataclass
class RemoveTaskObserverCommand(Command[OperationResult[TaskResponseDto]]):
    """Command to remove a user from the observers of a task."""

    task_id: str
    observer_id: str


class RemoveTaskObserverCommandHandler(
    TaskOrchestrationBase,
    CommandHandler[RemoveTaskObserverCommand, OperationResult[TaskResponseDto]],
):
    """Handle observer removals.

    Unlike additions, removing a user that does not observe the task is an
    error and nothing is persisted.
    """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: RemoveTaskObserverCommand) -> OperationResult[TaskResponseDto]:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id, "task.observer_id": command.observer_id})

        context = "when removing observer"
        user_context = f"when removing observer from task {command.task_id}"
        try:
            task, observer = await gather_all(
                self.resolver.resolve_task_async(command.task_id, context),
                self.resolver.resolve_user_async(command.observer_id, EntityKind.OBSERVER, user_context),
            )

            if not task.remove_observer(observer.id):
                raise ObserverNotInTaskError(task.id, observer.id)
            task.updated_at = datetime.now(UTC)

            updated_task = await self.task_repository.update_async(task)
            response = await self.respond_async(updated_task)
        except EntityNotFoundError as e:
            tasks_failed.add(1, {"reason": "not_found", "operation": "remove_observer"})
            return self.entity_not_found(e)

        processing_time_ms = (time.time() - start_time) * 1000
        task_observers_changed.add(1, {"change": "removed"})
        task_processing_time.record(processing_time_ms, {"operation": "remove_observer"})

        return self.ok(response)
