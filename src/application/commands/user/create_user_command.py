"""Create user command with handler."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler

from domain.repositories import UserDtoRepository
from integration.models.user_dto import UserDto
from observability import users_created

log = logging.getLogger(__name__)


@dataclass
class CreateUserCommand(Command[OperationResult[UserDto]]):
    """Command to register a user that tasks can reference."""

    username: str
    email: str | None = None
    user_id: str | None = None


class CreateUserCommandHandler(CommandHandler[CreateUserCommand, OperationResult[UserDto]]):
    def __init__(self, user_repository: UserDtoRepository):
        super().__init__()
        self.user_repository = user_repository

    async def handle_async(self, request: CreateUserCommand) -> OperationResult[UserDto]:
        command = request
        if not command.username or not command.username.strip():
            return self.bad_request("Username is required")

        if command.user_id and await self.user_repository.get_async(command.user_id) is not None:
            return self.conflict(f"User with id '{command.user_id}' already exists")

        user = UserDto(
            id=command.user_id or str(uuid4()),
            username=command.username.strip(),
            email=command.email,
            created_at=datetime.now(UTC),
        )
        saved_user = await self.user_repository.add_async(user)
        log.info(f"User '{saved_user.id}' created")
        users_created.add(1)

        return self.ok(saved_user)
