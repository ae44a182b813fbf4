"""
Cleanup Expired Sessions Use Case

Sweeps session rows whose expiry has passed.
"""

import logging

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.libs.result import Result, Return
from .dtos import CleanupResponse

logger = logging.getLogger(__name__)


class CleanupExpiredSessionsUseCase:
    """
    Safe to run concurrently with itself and with logins/logouts; the
    count is informational.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[CleanupResponse]:
        async with self.uow:
            removed = await self.uow.sessions.delete_expired()
            await self.uow.commit()

        if removed > 0:
            logger.info("Cleaned up %d expired sessions", removed)
        return Return.ok(CleanupResponse(removed=removed))
