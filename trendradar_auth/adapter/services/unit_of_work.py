from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from trendradar_auth.adapter.repositories.audit_log_repository import AuditLogRepository
from trendradar_auth.adapter.repositories.session_repository import SessionRepository
from trendradar_auth.adapter.repositories.storage import guarded
from trendradar_auth.adapter.repositories.user_preferences_repository import (
    UserPreferencesRepository,
)
from trendradar_auth.adapter.repositories.user_repository import UserRepository
from trendradar_auth.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, storage_timeout: Optional[float] = None):
        self.session = session
        self.storage_timeout = storage_timeout

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session, self.storage_timeout)
        self.preferences = UserPreferencesRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session, self.storage_timeout)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await guarded(self.session.commit(), self.storage_timeout)

    async def rollback(self):
        await self.session.rollback()
