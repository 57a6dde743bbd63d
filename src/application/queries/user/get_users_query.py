"""User queries with handlers."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from domain.repositories import UserDtoRepository
from integration.models.user_dto import UserDto


@dataclass
class GetUsersQuery(Query[OperationResult[list[UserDto]]]):
    """Query to retrieve all users."""


class GetUsersQueryHandler(QueryHandler[GetUsersQuery, OperationResult[list[UserDto]]]):
    def __init__(self, user_repository: UserDtoRepository):
        super().__init__()
        self.user_repository = user_repository

    async def handle_async(self, request: GetUsersQuery) -> OperationResult[list[UserDto]]:
        users = await self.user_repository.get_all_async()
        return self.ok(users)


@dataclass
class GetUserByIdQuery(Query[OperationResult[UserDto]]):
    """Query to retrieve a single user by ID."""

    user_id: str


class GetUserByIdQueryHandler(QueryHandler[GetUserByIdQuery, OperationResult[UserDto]]):
    def __init__(self, user_repository: UserDtoRepository):
        super().__init__()
        self.user_repository = user_repository

    async def handle_async(self, request: GetUserByIdQuery) -> OperationResult[UserDto]:
        user = await self.user_repository.get_async(request.user_id)
        if not user:
            return self.not_found(UserDto, request.user_id)
        return self.ok(user)
