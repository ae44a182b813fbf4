from abc import ABC, abstractmethod

from trendradar_auth.domain.entities import AuditLog


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer (append-only)"""

    @abstractmethod
    async def create(self, entry: AuditLog) -> AuditLog:
        """Append a new audit entry (immutable)"""
        pass
