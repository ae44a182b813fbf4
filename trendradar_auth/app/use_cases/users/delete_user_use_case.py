"""
Delete User Use Case
"""

import logging

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user.

    Business Rules:
    - Admins cannot delete their own account
    - Sessions and preferences go with the user
    - Audit entries stay; their user reference becomes NULL
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, requesting_user_id: int) -> Result[UserInfo]:
        if user_id == requesting_user_id:
            return Return.err(Error("CANNOT_DELETE_SELF", "Cannot delete your own account"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            deleted = UserInfo.from_user(user)
            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info("User %s deleted by %s", user_id, requesting_user_id)
        return Return.ok(deleted)
