import datetime
from dataclasses import dataclass, field

from neuroglia.data.abstractions import Identifiable, queryable

from domain.enums import TaskPriority, TaskStatus


@queryable
@dataclass
class TaskDto(Identifiable[str]):
    """Persisted task record: foreign keys only, never the resolved users."""

    id: str
    title: str
    description: str
    author_id: str
    assignee_id: str
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    observer_ids: list[str] = field(default_factory=list)
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None

    def has_observer(self, observer_id: str) -> bool:
        return observer_id in self.observer_ids

    def add_observer(self, observer_id: str) -> bool:
        """Add an observer with set semantics. Returns False when already present."""
        if self.has_observer(observer_id):
            return False
        self.observer_ids.append(observer_id)
        return True

    def remove_observer(self, observer_id: str) -> bool:
        """Remove an observer. Returns False when it was not a member."""
        if not self.has_observer(observer_id):
            return False
        self.observer_ids = [o for o in self.observer_ids if o != observer_id]
        return True
