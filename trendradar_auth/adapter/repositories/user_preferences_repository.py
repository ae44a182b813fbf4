from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from trendradar_auth.app.repositories.user_preferences_repository import (
    IUserPreferencesRepository,
)
from trendradar_auth.domain.entities import UserPreferences


class UserPreferencesRepository(IUserPreferencesRepository):
    """UserPreferences repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, preferences: UserPreferences) -> UserPreferences:
        self.session.add(preferences)
        await self.session.flush()
        await self.session.refresh(preferences)
        return preferences

    async def get_by_user_id(self, user_id: int) -> Optional[UserPreferences]:
        stmt = select(UserPreferences).where(UserPreferences.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()
