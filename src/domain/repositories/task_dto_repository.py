"""Abstract repository for the persisted task records."""

from abc import ABC, abstractmethod

from neuroglia.data.infrastructure.abstractions import Repository

from integration.models.task_dto import TaskDto


class TaskDtoRepository(Repository[TaskDto, str], ABC):
    """Abstract repository for TaskDto records.

    Inherits the point operations (get_async, add_async, update_async,
    remove_async) from Neuroglia's Repository; get_async returns None for
    unknown ids rather than raising.
    """

    @abstractmethod
    async def get_all_async(self) -> list[TaskDto]:
        """Retrieve all tasks."""
        pass
