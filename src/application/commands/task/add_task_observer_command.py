"""Add task observer command with handler."""

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from application.services import TaskOrchestrationBase, gather_all
from domain.exceptions import EntityKind, EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_response_dto import TaskResponseDto
from observability import task_observers_changed, task_processing_time, tasks_failed

log = logging.getLogger(__name__)


@dataclass
class AddTaskObserverCommand(Command[OperationResult[TaskResponseDto]]):
    """Command to add a user to the observers of a task."""

    task_id: str
    observer_id: str


class AddTaskObserverCommandHandler(
    TaskOrchestrationBase,
    CommandHandler[AddTaskObserverCommand, OperationResult[TaskResponseDto]],
):
    """Handle observer additions.

    Adding a user that already observes the task succeeds without changing
    the observer set.
    """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: AddTaskObserverCommand) -> OperationResult[TaskResponseDto]:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id, "task.observer_id": command.observer_id})

        context = "when adding observer"
        user_context = f"when adding observer to task {command.task_id}"
        try:
            task, observer = await gather_all(
                self.resolver.resolve_task_async(command.task_id, context),
                self.resolver.resolve_user_async(command.observer_id, EntityKind.OBSERVER, user_context),
            )

            added = task.add_observer(observer.id)
            if added:
                task.updated_at = datetime.now(UTC)
            else:
                log.debug(f"User '{observer.id}' already observes task '{task.id}'")

            updated_task = await self.task_repository.update_async(task)
            response = await self.respond_async(updated_task)
        except EntityNotFoundError as e:
            tasks_failed.add(1, {"reason": "not_found", "operation": "add_observer"})
            return self.entity_not_found(e)

        processing_time_ms = (time.time() - start_time) * 1000
        if added:
            task_observers_changed.add(1, {"change": "added"})
        task_processing_time.record(processing_time_ms, {"operation": "add_observer"})

        return self.ok(response)
