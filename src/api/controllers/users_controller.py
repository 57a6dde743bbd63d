"""Users API controller."""

from classy_fastapi.decorators import get, post
from neuroglia.dependency_injection import ServiceProviderBase
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.mvc import ControllerBase
from pydantic import BaseModel

from application.commands import CreateUserCommand
from application.queries import GetUserByIdQuery, GetUsersQuery


class CreateUserRequest(BaseModel):
    """Create user request model."""

    username: str
    email: str | None = None
    id: str | None = None


class UsersController(ControllerBase):
    def __init__(self, service_provider: ServiceProviderBase, mapper: Mapper, mediator: Mediator):
        super().__init__(service_provider, mapper, mediator)

    @get("/")
    async def get_users(self):
        result = await self.mediator.execute_async(GetUsersQuery())
        return self.process(result)

    @get("/{user_id}")
    async def get_user(self, user_id: str):
        result = await self.mediator.execute_async(GetUserByIdQuery(user_id=user_id))
        return self.process(result)

    @post("/")
    async def create_user(self, request: CreateUserRequest):
        command = CreateUserCommand(username=request.username, email=request.email, user_id=request.id)
        result = await self.mediator.execute_async(command)
        return self.process(result)
