"""API layer package.

This package contains the REST API controllers, built on Neuroglia's
ControllerBase and dispatching to the application layer via the Mediator.
"""

from .controllers import TasksController, UsersController

__all__ = [
    "TasksController",
    "UsersController",
]
