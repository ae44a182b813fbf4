"""
Resolve Identity Use Case

Turns a bearer token into the user making the request.
"""

from typing import Optional

from trendradar_auth.app.services.token_codec import TokenCodec
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.domain.entities import UserStatus
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import UserInfo

TOKEN_INVALID = Error("TOKEN_INVALID", "Invalid or expired token")
SESSION_NOT_FOUND = Error("SESSION_NOT_FOUND", "Invalid or expired token")


class ResolveIdentityUseCase:
    """
    Use case for resolving a bearer token on every authenticated request.

    Business Rules:
    - Token signature and expiry are verified first
    - A live (unexpired, not revoked) session row must exist for the
      literal token; either check failing denies
    - The user is loaded fresh by the id in the claims, so role and
      status changes apply on the next request
    - Users that are no longer active do not resolve
    """

    def __init__(self, uow: UnitOfWork, token_codec: TokenCodec):
        self.uow = uow
        self.token_codec = token_codec

    async def execute(self, token: str) -> Result[UserInfo]:
        """
        Execute resolve use case.

        Returns:
            Result with UserInfo, or Error(TOKEN_INVALID | SESSION_NOT_FOUND)
        """
        claims = self.token_codec.verify(token)
        if claims is None:
            return Return.err(TOKEN_INVALID)

        async with self.uow:
            session = await self.uow.sessions.find_valid(token)
            if session is None:
                return Return.err(SESSION_NOT_FOUND)

            user = await self.uow.users.get_by_id(claims.user_id)
            if user is None or user.status != UserStatus.active:
                return Return.err(SESSION_NOT_FOUND)

            return Return.ok(UserInfo.from_user(user))

    async def resolve(self, token: str) -> Optional[UserInfo]:
        """Convenience form: the user, or None on any failure"""
        result = await self.execute(token)
        return result.value if result.is_ok() else None
