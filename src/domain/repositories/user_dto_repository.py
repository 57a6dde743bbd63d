"""Abstract repository for user records."""

from abc import ABC, abstractmethod

from neuroglia.data.infrastructure.abstractions import Repository

from integration.models.user_dto import UserDto


class UserDtoRepository(Repository[UserDto, str], ABC):
    """Abstract repository for UserDto records."""

    @abstractmethod
    async def get_all_async(self) -> list[UserDto]:
        """Retrieve all users."""
        pass

    @abstractmethod
    async def get_many_async(self, user_ids: list[str]) -> list[UserDto]:
        """Retrieve the users matching the given ids.

        Unknown ids are silently omitted, so callers must not assume a 1:1
        correspondence with the requested ids.
        """
        pass
