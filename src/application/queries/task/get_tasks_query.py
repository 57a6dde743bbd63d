"""Get tasks query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler
from neuroglia.observability.tracing import add_span_attributes

from application.services import TaskOrchestrationBase
from domain.exceptions import EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_response_dto import TaskResponseDto


@dataclass
class GetTasksQuery(Query[OperationResult[list[TaskResponseDto]]]):
    """Query to retrieve all tasks, hydrated."""


class GetTasksQueryHandler(TaskOrchestrationBase, QueryHandler[GetTasksQuery, OperationResult[list[TaskResponseDto]]]):
    """Handle task listing.

    Tasks are hydrated concurrently. There is no partial-result contract:
    if any task references a missing author or assignee, the whole query
    fails with that not-found.
    """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: GetTasksQuery) -> OperationResult[list[TaskResponseDto]]:
        tasks = await self.task_repository.get_all_async()
        add_span_attributes({"tasks.count": len(tasks)})

        try:
            hydrated_tasks = await self.hydrator.hydrate_all_async(tasks)
        except EntityNotFoundError as e:
            return self.entity_not_found(e)

        return self.ok(self.assembler.to_responses(hydrated_tasks))
