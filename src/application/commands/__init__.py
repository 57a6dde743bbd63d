"""Application commands package.

This package organizes commands into semantic submodules by entity:
- task/: Task CRUD and observer commands
- user/: User registration

All commands are re-exported here for Neuroglia framework auto-discovery.
"""

# Task commands
from .task import (
    AddTaskObserverCommand,
    AddTaskObserverCommandHandler,
    CreateTaskCommand,
    CreateTaskCommandHandler,
    DeleteTaskCommand,
    DeleteTaskCommandHandler,
    RemoveTaskObserverCommand,
    RemoveTaskObserverCommandHandler,
    UpdateTaskCommand,
    UpdateTaskCommandHandler,
)

# User commands
from .user import CreateUserCommand, CreateUserCommandHandler

__all__ = [
    # Task commands
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
    # User commands
    "CreateUserCommand",
    "CreateUserCommandHandler",
]
