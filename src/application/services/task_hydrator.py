"""Hydration of persisted tasks into their composite view."""

import logging

from opentelemetry import trace

from application.services.fan_out import gather_all
from application.services.reference_resolver import ReferenceResolver
from domain.exceptions import EntityKind
from domain.models import HydratedTask
from domain.repositories import UserDtoRepository
from integration.models.task_dto import TaskDto
from integration.models.user_dto import UserDto

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class TaskHydrator:
    """Attaches the author, assignee and observers of a task.

    The three lookups run concurrently and are joined before the result is
    assembled. When several of them fail, the failure is reported in the
    fixed order author, assignee, observers. Hydration never writes to the
    store.
    """

    def __init__(self, resolver: ReferenceResolver, user_repository: UserDtoRepository):
        self.resolver = resolver
        self.user_repository = user_repository

    async def hydrate_async(self, task: TaskDto) -> HydratedTask:
        with tracer.start_as_current_span("hydrate_task") as span:
            span.set_attribute("task.id", task.id)
            span.set_attribute("task.observer_count", len(task.observer_ids or []))

            author, assignee, observers = await gather_all(
                self.resolver.resolve_user_async(task.author_id, EntityKind.AUTHOR),
                self.resolver.resolve_user_async(task.assignee_id, EntityKind.ASSIGNEE),
                self._fetch_observers_async(task.observer_ids or []),
            )
            return HydratedTask(task=task, author=author, assignee=assignee, observers=observers)

    async def hydrate_all_async(self, tasks: list[TaskDto]) -> list[HydratedTask]:
        """Hydrate every task concurrently; the first failure in list order fails the whole call."""
        if not tasks:
            return []
        return await gather_all(*(self.hydrate_async(task) for task in tasks))

    async def _fetch_observers_async(self, observer_ids: list[str]) -> list[UserDto]:
        # dict.fromkeys keeps the first occurrence of each id, in order
        unique_ids = list(dict.fromkeys(observer_ids))
        if not unique_ids:
            return []

        users = await self.user_repository.get_many_async(unique_ids)
        by_id = {user.id: user for user in users}
        missing = [observer_id for observer_id in unique_ids if observer_id not in by_id]
        if missing:
            log.debug(f"Skipping unknown observer ids while hydrating: {missing}")
        return [by_id[observer_id] for observer_id in unique_ids if observer_id in by_id]
