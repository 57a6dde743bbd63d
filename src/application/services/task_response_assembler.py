"""Maps hydrated tasks to their outbound representation.

The base mapping copies the persisted fields; enrichment steps then attach
the resolved users. Steps run in order and are supplied explicitly, so a
caller can assemble a lighter response by passing a shorter pipeline.
"""

from typing import Callable

from domain.models import HydratedTask
from integration.models.task_dto import TaskDto
from integration.models.task_response_dto import TaskResponseDto

ResponseEnricher = Callable[[TaskResponseDto, HydratedTask], None]


def attach_author(response: TaskResponseDto, hydrated: HydratedTask) -> None:
    response.author = hydrated.author


def attach_assignee(response: TaskResponseDto, hydrated: HydratedTask) -> None:
    response.assignee = hydrated.assignee


def attach_observers(response: TaskResponseDto, hydrated: HydratedTask) -> None:
    response.observers = list(hydrated.observers)


DEFAULT_ENRICHERS: tuple[ResponseEnricher, ...] = (attach_author, attach_assignee, attach_observers)


class TaskResponseAssembler:
    def __init__(self, enrichers: tuple[ResponseEnricher, ...] = DEFAULT_ENRICHERS):
        self.enrichers = enrichers

    def to_response(self, hydrated: HydratedTask) -> TaskResponseDto:
        response = self._map_base(hydrated.task)
        for enrich in self.enrichers:
            enrich(response, hydrated)
        return response

    def to_responses(self, hydrated_tasks: list[HydratedTask]) -> list[TaskResponseDto]:
        return [self.to_response(hydrated) for hydrated in hydrated_tasks]

    @staticmethod
    def _map_base(task: TaskDto) -> TaskResponseDto:
        return TaskResponseDto(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            author_id=task.author_id,
            assignee_id=task.assignee_id,
            observer_ids=list(task.observer_ids or []),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
