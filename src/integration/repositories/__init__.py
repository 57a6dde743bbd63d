"""Integration layer repositories package.

Contains MongoDB repository implementations for the entity store.
These implement the abstract interfaces defined in domain/repositories/.
"""

from .motor_task_dto_repository import MotorTaskDtoRepository
from .motor_user_dto_repository import MotorUserDtoRepository

__all__ = [
    "MotorTaskDtoRepository",
    "MotorUserDtoRepository",
]
