"""Get task by ID query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from application.services import TaskOrchestrationBase
from domain.exceptions import EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_response_dto import TaskResponseDto


@dataclass
class GetTaskByIdQuery(Query[OperationResult[TaskResponseDto]]):
    """Query to retrieve a single hydrated task by ID."""

    task_id: str


class GetTaskByIdQueryHandler(TaskOrchestrationBase, QueryHandler[GetTaskByIdQuery, OperationResult[TaskResponseDto]]):
    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__(task_repository, user_repository)

    async def handle_async(self, request: GetTaskByIdQuery) -> OperationResult[TaskResponseDto]:
        try:
            task = await self.resolver.resolve_task_async(request.task_id)
            response = await self.respond_async(task)
        except EntityNotFoundError as e:
            return self.entity_not_found(e)

        return self.ok(response)
