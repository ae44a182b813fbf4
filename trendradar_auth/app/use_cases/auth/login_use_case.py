"""
Login Use Case

Authenticates a user by email/password and opens a session.
"""

import logging

from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.token_codec import TokenCodec
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.domain.base import normalize_email, utcnow
from trendradar_auth.domain.entities import Session, UserStatus
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email, non-active account and wrong password all fail with
      the same INVALID_CREDENTIALS error
    - Each failure path costs one bcrypt check (no timing oracle)
    - Session expiry equals the token expiry
    - Updates user.last_login_at
    - No session is created on failure
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, token_codec: TokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.token_codec = token_codec

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email (normalized before lookup)
            password: Plain text password

        Returns:
            Result with LoginResponse (user, token, expiry), or Error
        """
        email = normalize_email(email)

        async with self.uow:
            # 1. Lookup
            user = await self.uow.users.get_by_email(email)
            if user is None:
                self.hasher.verify_dummy(password)
                logger.warning("Login failed: unknown email")
                return Return.err(INVALID_CREDENTIALS)

            # 2. Status check
            if user.status != UserStatus.active:
                self.hasher.verify_dummy(password)
                logger.warning("Login failed: user %s is %s", user.id, user.status.value)
                return Return.err(INVALID_CREDENTIALS)

            # 3. Password check
            if not self.hasher.verify(password, user.password_hash):
                logger.warning("Login failed: wrong password for user %s", user.id)
                return Return.err(INVALID_CREDENTIALS)

            # 4. Issue token and persist the session
            issued = self.token_codec.issue(user.id, user.email, user.role.value)
            session = Session(
                user_id=user.id,
                token=issued.token,
                expires_at=issued.expires_at,
            )
            await self.uow.sessions.create(session)

            user.last_login_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info("User %s logged in (%s)", user.id, user.role.value)

            # 5. Return
            return Return.ok(
                LoginResponse(
                    user=UserInfo.from_user(user),
                    token=issued.token,
                    expires_at=issued.expires_at,
                )
            )
