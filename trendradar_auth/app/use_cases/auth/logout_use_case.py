"""
Logout Use Case

Ends the session bound to a token.
"""

import logging

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.libs.result import Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logging out.

    Business Rules:
    - Always succeeds, even for unknown, expired or malformed tokens
    - The signed token stays cryptographically valid but can no longer
      be resolved because its session row is gone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[LogoutResponse]:
        async with self.uow:
            removed = await self.uow.sessions.delete_by_token(token)
            await self.uow.commit()

        if removed:
            logger.info("Session closed on logout")
        return Return.ok(LogoutResponse(status="logged_out", sessions_removed=removed))
