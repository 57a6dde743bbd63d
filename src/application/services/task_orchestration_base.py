"""Shared wiring for the task command and query handlers."""

from neuroglia.core import OperationResult

from application.services.reference_resolver import ReferenceResolver
from application.services.task_hydrator import TaskHydrator
from application.services.task_response_assembler import TaskResponseAssembler
from domain.exceptions import EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_dto import TaskDto
from integration.models.task_response_dto import TaskResponseDto


class TaskOrchestrationBase:
    """Represents the base class for handlers orchestrating Task operations.

    Every operation follows the same pipeline: validate references, then
    mutate and persist, then hydrate and assemble the response. Reference
    failures surface as EntityNotFoundError and are turned into 404 results
    with entity_not_found().
    """

    task_repository: TaskDtoRepository
    """ Gets the store holding the persisted tasks """

    user_repository: UserDtoRepository
    """ Gets the store holding the users referenced by tasks """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        super().__init__()
        self.task_repository = task_repository
        self.user_repository = user_repository
        self.resolver = ReferenceResolver(task_repository, user_repository)
        self.hydrator = TaskHydrator(self.resolver, user_repository)
        self.assembler = TaskResponseAssembler()

    async def respond_async(self, task: TaskDto) -> TaskResponseDto:
        """Hydrates the given persisted task and maps it to its response."""
        hydrated = await self.hydrator.hydrate_async(task)
        return self.assembler.to_response(hydrated)

    @staticmethod
    def entity_not_found(error: EntityNotFoundError) -> OperationResult:
        return OperationResult("Not Found", 404, detail=error.message, type="https://www.w3.org/Protocols/HTTP/HTRESP.html#:~:text=Not%20found")
