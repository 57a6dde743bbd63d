"""Domain exceptions for the task tracker.

Resolution failures are raised by the reference resolver and the task
hydrator, then translated into 404 operation results by the handlers.
"""

from enum import Enum


class EntityKind(str, Enum):
    """Kinds of entities (and roles) a reference can resolve to."""

    TASK = "Task"
    USER = "User"
    AUTHOR = "Author"
    ASSIGNEE = "Assignee"
    OBSERVER = "Observer"
    OBSERVER_IN_TASK = "ObserverInTask"


class DomainError(Exception):
    """Base exception for domain rule violations.

    Attributes:
        message: Human-readable description of the violation.
        code: Optional error code for programmatic handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class EntityNotFoundError(DomainError):
    """Raised when a referenced entity does not exist.

    Absence is definitive: callers must not retry.

    Attributes:
        kind: The entity kind or role that could not be resolved.
        entity_id: The identifier that was looked up.
        context: The operation context embedded in the message, if any.
    """

    def __init__(self, kind: EntityKind, entity_id: str, context: str | None = None, message: str | None = None) -> None:
        if message is None:
            label = "User" if kind == EntityKind.OBSERVER else kind.value
            message = f"{label} not found {context} with id: {entity_id}" if context else f"{label} not found with id: {entity_id}"
        super().__init__(message, code="ENTITY_NOT_FOUND")
        self.kind = kind
        self.entity_id = entity_id
        self.context = context


class ObserverNotInTaskError(EntityNotFoundError):
    """Raised when removing an observer that is not a member of the task."""

    def __init__(self, task_id: str, observer_id: str) -> None:
        super().__init__(
            EntityKind.OBSERVER_IN_TASK,
            observer_id,
            context=f"task {task_id}",
            message=f"Task with id: {task_id} doesn't contain observer with id: {observer_id}",
        )
        self.task_id = task_id
