"""MongoDB repository implementation for TaskDto records."""

from neuroglia.data.infrastructure.mongo import MotorRepository

from domain.repositories.task_dto_repository import TaskDtoRepository
from integration.models.task_dto import TaskDto


class MotorTaskDtoRepository(MotorRepository[TaskDto, str], TaskDtoRepository):
    """
    MongoDB-based repository for TaskDto records.

    Extends Neuroglia's MotorRepository to inherit standard CRUD operations
    and implements TaskDtoRepository for custom query methods.
    """

    async def get_all_async(self) -> list[TaskDto]:
        """Retrieve all tasks from MongoDB.

        Delegates to MotorRepository's built-in get_all_async method.
        """
        return await super().get_all_async()
