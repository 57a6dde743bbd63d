"""Task commands submodule."""

from .add_task_observer_command import AddTaskObserverCommand, AddTaskObserverCommandHandler
from .create_task_command import CreateTaskCommand, CreateTaskCommandHandler
from .delete_task_command import DeleteTaskCommand, DeleteTaskCommandHandler
from .remove_task_observer_command import RemoveTaskObserverCommand, RemoveTaskObserverCommandHandler
from .update_task_command import UpdateTaskCommand, UpdateTaskCommandHandler

__all__ = [
    "AddTaskObserverCommand",
    "AddTaskObserverCommandHandler",
    "CreateTaskCommand",
    "CreateTaskCommandHandler",
    "DeleteTaskCommand",
    "DeleteTaskCommandHandler",
    "RemoveTaskObserverCommand",
    "RemoveTaskObserverCommandHandler",
    "UpdateTaskCommand",
    "UpdateTaskCommandHandler",
]
