"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- In-memory task and user stores seeded with a few users
- Repository mocks for handler tests
"""

import os
from typing import Any, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from _pytest.config import Config

from integration.models.user_dto import UserDto
from tests.fixtures.factories import UserDtoFactory
from tests.fixtures.in_memory_repositories import InMemoryTaskDtoRepository, InMemoryUserDtoRepository

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (may use external services)")
    config.addinivalue_line("markers", "asyncio: Async tests")
    config.addinivalue_line("markers", "repository: Repository layer tests")
    config.addinivalue_line("markers", "command: Command handler tests")
    config.addinivalue_line("markers", "query: Query handler tests")


# ============================================================================
# ENTITY STORE FIXTURES
# ============================================================================


@pytest.fixture
def journal() -> list[tuple[str, str, Any]]:
    """Shared call journal of the in-memory stores, in call order."""
    return []


@pytest.fixture
def users() -> list[UserDto]:
    """Users u1, u2 and u3 (u9 is never registered)."""
    return UserDtoFactory.create_many("u1", "u2", "u3")


@pytest.fixture
def user_repository(journal: list[tuple[str, str, Any]], users: list[UserDto]) -> InMemoryUserDtoRepository:
    """Provide an in-memory user store seeded with the default users."""
    repository = InMemoryUserDtoRepository(journal)
    repository.seed(*users)
    return repository


@pytest.fixture
def task_repository(journal: list[tuple[str, str, Any]]) -> InMemoryTaskDtoRepository:
    """Provide an empty in-memory task store."""
    return InMemoryTaskDtoRepository(journal)


@pytest.fixture
def mock_repository() -> MagicMock:
    """Provide a mock repository for testing command/query handlers.

    Mocks the Neuroglia Repository point operations plus the custom
    TaskDtoRepository / UserDtoRepository methods.
    """
    mock: MagicMock = MagicMock()
    mock.get_async = AsyncMock(return_value=None)
    mock.add_async = AsyncMock()
    mock.update_async = AsyncMock()
    mock.remove_async = AsyncMock()
    mock.contains_async = AsyncMock(return_value=False)
    mock.get_all_async = AsyncMock(return_value=[])
    mock.get_many_async = AsyncMock(return_value=[])
    return mock


# ============================================================================
# CLEANUP FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables after each test."""
    original_env: dict[str, str] = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
