"""MongoDB repository implementation for UserDto records."""

from neuroglia.data.infrastructure.mongo import MotorRepository

from domain.repositories.user_dto_repository import UserDtoRepository
from integration.models.user_dto import UserDto


class MotorUserDtoRepository(MotorRepository[UserDto, str], UserDtoRepository):
    """MongoDB-based repository for UserDto records."""

    async def get_all_async(self) -> list[UserDto]:
        return await super().get_all_async()

    async def get_many_async(self, user_ids: list[str]) -> list[UserDto]:
        """Get multiple users by their IDs.

        Args:
            user_ids: List of user IDs to retrieve

        Returns:
            List of users (may be less than requested if some not found)
        """
        if not user_ids:
            return []

        # Use MongoDB's $in operator for efficient batch lookup
        return await self.find_async({"id": {"$in": list(user_ids)}})
