"""Tasks API controller."""

from classy_fastapi.decorators import delete, get, post, put
from neuroglia.dependency_injection import ServiceProviderBase
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.mvc import ControllerBase
from pydantic import BaseModel

from application.commands import AddTaskObserverCommand, CreateTaskCommand, DeleteTaskCommand, RemoveTaskObserverCommand, UpdateTaskCommand
from application.queries import GetTaskByIdQuery, GetTasksQuery


class CreateTaskRequest(BaseModel):
    """Create task request model."""

    title: str
    author_id: str
    assignee_id: str
    description: str = ""
    status: str = "pending"
    priority: str = "medium"


class UpdateTaskRequest(BaseModel):
    """Update task request model. Omitted fields are left unchanged."""

    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    author_id: str | None = None
    assignee_id: str | None = None


class TasksController(ControllerBase):
    """Controller for task management endpoints."""

    def __init__(self, service_provider: ServiceProviderBase, mapper: Mapper, mediator: Mediator):
        super().__init__(service_provider, mapper, mediator)

    @get("/")
    async def get_tasks(self):
        """Get all tasks with their author, assignee and observers."""
        result = await self.mediator.execute_async(GetTasksQuery())
        return self.process(result)

    @get("/{task_id}")
    async def get_task(self, task_id: str):
        """Get a single hydrated task by ID."""
        result = await self.mediator.execute_async(GetTaskByIdQuery(task_id=task_id))
        return self.process(result)

    @post("/")
    async def create_task(self, request: CreateTaskRequest):
        """Create a new task.

        Both the author and the assignee must reference existing users.
        """
        command = CreateTaskCommand(
            title=request.title,
            description=request.description,
            author_id=request.author_id,
            assignee_id=request.assignee_id,
            status=request.status,
            priority=request.priority,
        )

        result = await self.mediator.execute_async(command)
        return self.process(result)

    @put("/{task_id}")
    async def update_task(self, task_id: str, request: UpdateTaskRequest):
        """Update an existing task."""
        command = UpdateTaskCommand(
            task_id=task_id,
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
            author_id=request.author_id,
            assignee_id=request.assignee_id,
        )

        result = await self.mediator.execute_async(command)
        return self.process(result)

    @delete("/{task_id}")
    async def delete_task(self, task_id: str):
        """Delete an existing task."""
        result = await self.mediator.execute_async(DeleteTaskCommand(task_id=task_id))
        return self.process(result)

    @put("/{task_id}/observers/{observer_id}")
    async def add_observer(self, task_id: str, observer_id: str):
        """Add a user to the observers of a task. Adding an existing observer is a no-op."""
        result = await self.mediator.execute_async(AddTaskObserverCommand(task_id=task_id, observer_id=observer_id))
        return self.process(result)

    @delete("/{task_id}/observers/{observer_id}")
    async def remove_observer(self, task_id: str, observer_id: str):
        """Remove a user from the observers of a task.

        Fails with 404 when the user does not observe the task.
        """
        result = await self.mediator.execute_async(RemoveTaskObserverCommand(task_id=task_id, observer_id=observer_id))
        return self.process(result)
