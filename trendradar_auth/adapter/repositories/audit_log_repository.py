from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from trendradar_auth.adapter.repositories.storage import guarded
from trendradar_auth.app.repositories.audit_log_repository import IAuditLogRepository
from trendradar_auth.domain.entities import AuditLog


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, default_timeout: Optional[float] = None):
        self.session = session
        self.default_timeout = default_timeout

    async def create(self, entry: AuditLog) -> AuditLog:
        """Append a new audit entry (immutable)"""

        async def _create():
            self.session.add(entry)
            await self.session.flush()
            await self.session.refresh(entry)
            return entry

        return await guarded(_create(), self.default_timeout)
