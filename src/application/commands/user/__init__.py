"""User commands submodule."""

from .create_user_command import CreateUserCommand, CreateUserCommandHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserCommandHandler",
]
