from abc import ABC, abstractmethod
from typing import Optional

from trendradar_auth.domain.entities import UserPreferences


class IUserPreferencesRepository(ABC):
    """UserPreferences repository interface - application layer"""

    @abstractmethod
    async def create(self, preferences: UserPreferences) -> UserPreferences:
        """Create the preferences row of a user"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> Optional[UserPreferences]:
        """Get preferences of a user"""
        pass
