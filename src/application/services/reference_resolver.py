"""Resolution of single foreign-key references."""

import logging
from domain.exceptions import EntityKind, EntityNotFoundError
from domain.repositories import TaskDtoRepository, UserDtoRepository
from integration.models.task_dto import TaskDto
from integration.models.user_dto import UserDto

log = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves an entity id to its record, turning absence into EntityNotFoundError.

    One store lookup per call and no retries. The caller provides the
    operation context (e.g. "when creating task") used in the error message.
    """

    def __init__(self, task_repository: TaskDtoRepository, user_repository: UserDtoRepository):
        self.task_repository = task_repository
        self.user_repository = user_repository

    async def resolve_async(self, kind: EntityKind, entity_id: str, context: str | None = None) -> TaskDto | UserDto:
        if kind == EntityKind.TASK:
            return await self.resolve_task_async(entity_id, context)
        return await self.resolve_user_async(entity_id, kind, context)

    async def resolve_task_async(self, task_id: str, context: str | None = None) -> TaskDto:
        task = await self.task_repository.get_async(task_id)
        if task is None:
            log.debug(f"Task '{task_id}' not found ({context or 'lookup'})")
            raise EntityNotFoundError(EntityKind.TASK, task_id, context)
        return task

    async def resolve_user_async(self, user_id: str, role: EntityKind = EntityKind.USER, context: str | None = None) -> UserDto:
        user = await self.user_repository.get_async(user_id)
        if user is None:
            log.debug(f"{role.value} '{user_id}' not found ({context or 'lookup'})")
            raise EntityNotFoundError(role, user_id, context)
        return user
