"""User queries submodule."""

from .get_users_query import GetUserByIdQuery, GetUserByIdQueryHandler, GetUsersQuery, GetUsersQueryHandler

__all__ = [
    "GetUserByIdQuery",
    "GetUserByIdQueryHandler",
    "GetUsersQuery",
    "GetUsersQueryHandler",
]
