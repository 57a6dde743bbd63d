"""Test mixins for reusable test patterns.

Provides assertion helpers for task responses and not-found results,
and helpers for building async mocks.
"""

from typing import Any
from unittest.mock import AsyncMock

from neuroglia.core import OperationResult

from integration.models.task_response_dto import TaskResponseDto

# ============================================================================
# ASSERTION MIXINS
# ============================================================================


class AssertionMixin:
    """Mixin providing custom assertion helpers."""

    @staticmethod
    def assert_hydrated(response: TaskResponseDto) -> None:
        """Assert the resolved users match the foreign keys of the response."""
        assert response.author is not None, "Author was not attached"
        assert response.assignee is not None, "Assignee was not attached"
        assert response.author.id == response.author_id, "Author doesn't match author_id"
        assert response.assignee.id == response.assignee_id, "Assignee doesn't match assignee_id"
        assert {o.id for o in response.observers} == set(response.observer_ids), "Observers don't match observer_ids"

    @staticmethod
    def assert_not_found(result: OperationResult[Any], *fragments: str) -> None:
        """Assert a 404 result whose detail mentions every given fragment."""
        assert not result.is_success, "Expected a failed result"
        assert result.status_code == 404, f"Expected 404, got {result.status_code}"
        for fragment in fragments:
            assert fragment in (result.detail or ""), f"'{fragment}' not found in detail: {result.detail}"

    @staticmethod
    def assert_list_length(actual: list[Any], expected_length: int) -> None:
        """Assert list has expected length with helpful error message."""
        actual_length: int = len(actual)
        assert actual_length == expected_length, f"Expected list length {expected_length}, got {actual_length}"


# ============================================================================
# MOCK HELPER MIXINS
# ============================================================================


class MockHelperMixin:
    """Mixin providing utilities for working with mocks."""

    @staticmethod
    def create_async_mock(return_value: Any = None) -> AsyncMock:
        """Create an AsyncMock with optional return value."""
        mock: AsyncMock = AsyncMock()
        mock.return_value = return_value
        return mock


# ============================================================================
# COMBINED TEST BASE
# ============================================================================


class BaseTestCase(
    AssertionMixin,
    MockHelperMixin,
):
    """Combined base test class with all mixins.

    Use this as a base class for test classes that need multiple utilities.
    """

    pass
