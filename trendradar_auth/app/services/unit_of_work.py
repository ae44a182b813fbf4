from abc import ABC, abstractmethod

from trendradar_auth.app.repositories.audit_log_repository import IAuditLogRepository
from trendradar_auth.app.repositories.session_repository import ISessionRepository
from trendradar_auth.app.repositories.user_preferences_repository import (
    IUserPreferencesRepository,
)
from trendradar_auth.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    preferences: IUserPreferencesRepository
    audit_logs: IAuditLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
