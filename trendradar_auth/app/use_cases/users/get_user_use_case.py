"""
Get User Use Case
"""

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import PreferencesInfo, UserDetail


class GetUserUseCase:
    """Loads one user together with their preferences"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserDetail]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            preferences = await self.uow.preferences.get_by_user_id(user_id)

            return Return.ok(
                UserDetail(
                    user=UserInfo.from_user(user),
                    preferences=PreferencesInfo.from_preferences(preferences) if preferences else None,
                )
            )
