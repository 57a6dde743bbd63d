"""Test fixtures package."""

from .factories import HydratedTaskFactory, TaskDtoFactory, UserDtoFactory
from .in_memory_repositories import InMemoryTaskDtoRepository, InMemoryUserDtoRepository
from .mixins import BaseTestCase

__all__ = [
    "BaseTestCase",
    "HydratedTaskFactory",
    "InMemoryTaskDtoRepository",
    "InMemoryUserDtoRepository",
    "TaskDtoFactory",
    "UserDtoFactory",
]
