"""
Update User Use Case

Admin edits of profile, credentials, role and status.
"""

import logging

from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.domain.base import normalize_email, utcnow
from trendradar_auth.domain.entities import UserStatus
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import UpdateUserCommand, UpdateUserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user.

    Business Rules:
    - Only provided fields change; updated_at is refreshed
    - New email must not belong to another user (EMAIL_IN_USE)
    - A password change or a move to a non-active status ends every
      session of the user
    - Role changes apply on the user's next request (identity is reloaded
      per request), so sessions are kept
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, user_id: int, command: UpdateUserCommand) -> Result[UpdateUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            changed = []

            if command.email is not None:
                email = normalize_email(command.email)
                if email != user.email:
                    other = await self.uow.users.get_by_email(email)
                    if other is not None and other.id != user.id:
                        return Return.err(Error("EMAIL_IN_USE", "Email already in use"))
                    user.email = email
                    changed.append("email")

            if command.name is not None and command.name != user.name:
                user.name = command.name
                changed.append("name")

            if command.role is not None and command.role != user.role:
                user.role = command.role
                changed.append("role")

            if command.status is not None and command.status != user.status:
                user.status = command.status
                changed.append("status")

            if command.password is not None:
                user.password_hash = self.hasher.hash(command.password)
                changed.append("password")

            revoked = 0
            if "password" in changed or ("status" in changed and user.status != UserStatus.active):
                revoked = await self.uow.sessions.delete_all_for_user(user.id)

            user.updated_at = utcnow()
            await self.uow.users.update(user)
            await self.uow.commit()

        logger.info("User %s updated: %s", user_id, ", ".join(changed) or "no changes")
        return Return.ok(
            UpdateUserResponse(
                user=UserInfo.from_user(user),
                changed_fields=changed,
                sessions_revoked=revoked,
            )
        )
