"""Application queries package.

This package organizes queries into semantic submodules by entity:
- task/: Hydrated task retrieval queries
- user/: User retrieval queries

All queries are re-exported here for Neuroglia framework auto-discovery.
"""

# Task queries
from .task import GetTaskByIdQuery, GetTaskByIdQueryHandler, GetTasksQuery, GetTasksQueryHandler

# User queries
from .user import GetUserByIdQuery, GetUserByIdQueryHandler, GetUsersQuery, GetUsersQueryHandler

__all__ = [
    # Task queries
    "GetTaskByIdQuery",
    "GetTaskByIdQueryHandler",
    "GetTasksQuery",
    "GetTasksQueryHandler",
    # User queries
    "GetUserByIdQuery",
    "GetUserByIdQueryHandler",
    "GetUsersQuery",
    "GetUsersQueryHandler",
]
