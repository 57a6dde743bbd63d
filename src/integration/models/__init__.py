from .task_dto import TaskDto
from .task_response_dto import TaskResponseDto
from .user_dto import UserDto

__all__ = [
    "TaskDto",
    "TaskResponseDto",
    "UserDto",
]
