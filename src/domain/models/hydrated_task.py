"""Hydrated task view.

A HydratedTask pairs a persisted TaskDto with the users its foreign keys
resolve to. It is built per orchestration call and never persisted.
"""

from dataclasses import dataclass, field

from integration.models.task_dto import TaskDto
from integration.models.user_dto import UserDto


@dataclass
class HydratedTask:
    """A task together with its resolved author, assignee and observers."""

    task: TaskDto
    author: UserDto
    assignee: UserDto
    observers: list[UserDto] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def resolved_observer_ids(self) -> set[str]:
        """Ids of the observers that resolved; dangling ids in task.observer_ids are absent."""
        return {observer.id for observer in self.observers}
