"""
Register Use Case

Creates an account (Admin-initiated or bootstrap).
"""

import logging

from sqlalchemy.exc import IntegrityError

from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.domain.base import normalize_email
from trendradar_auth.domain.entities import User, UserPreferences
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import RegisterCommand, UserInfo

logger = logging.getLogger(__name__)

ALREADY_EXISTS = Error("ALREADY_EXISTS", "User already exists")


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Normalize email and check it is not taken
    2. Hash password with the configured bcrypt cost
    3. Create User
    4. Create default UserPreferences (language EN, timezone UTC, 2FA off)
    5. Commit both atomically
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[UserInfo]:
        """
        Execute register use case

        Returns:
            Result[UserInfo] for the new user, or Error(ALREADY_EXISTS)
        """
        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(ALREADY_EXISTS)

            user = User(
                email=email,
                name=command.name,
                password_hash=self.hasher.hash(command.password),
                role=command.role,
                status=command.status,
            )

            try:
                user = await self.uow.users.create(user)
                await self.uow.preferences.create(
                    UserPreferences(
                        user_id=user.id,
                        language="EN",
                        timezone="UTC",
                        two_fa_enabled=False,
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration of the same email
                await self.uow.rollback()
                return Return.err(ALREADY_EXISTS)

            logger.info("User registered: %s (%s)", user.id, user.role.value)
            return Return.ok(UserInfo.from_user(user))
