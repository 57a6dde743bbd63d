"""Task queries submodule."""

from .get_task_by_id_query import GetTaskByIdQuery, GetTaskByIdQueryHandler
from .get_tasks_query import GetTasksQuery, GetTasksQueryHandler

__all__ = [
    "GetTaskByIdQuery",
    "GetTaskByIdQueryHandler",
    "GetTasksQuery",
    "GetTasksQueryHandler",
]
