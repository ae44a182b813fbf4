from abc import ABC, abstractmethod
from typing import List, Optional

from trendradar_auth.domain.entities import Session


class ISessionRepository(ABC):
    """
    Session store interface - application layer

    Every method takes an optional timeout in seconds and raises
    StorageError when the store is unreachable or too slow.
    """

    @abstractmethod
    async def create(self, session: Session, timeout: Optional[float] = None) -> Session:
        """Insert a new session"""
        pass

    @abstractmethod
    async def find_valid(self, token: str, timeout: Optional[float] = None) -> Optional[Session]:
        """Session for the token, only if it has not expired"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str, timeout: Optional[float] = None) -> int:
        """Delete the session for a token. Returns 0 if there was none."""
        pass

    @abstractmethod
    async def delete_all_for_user(
        self, user_id: int, except_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> int:
        """Delete every session of a user, optionally keeping one token. Returns count."""
        pass

    @abstractmethod
    async def delete_expired(self, timeout: Optional[float] = None) -> int:
        """Delete sessions with expires_at <= now. Returns count."""
        pass

    @abstractmethod
    async def list_active_for_user(
        self, user_id: int, timeout: Optional[float] = None
    ) -> List[Session]:
        """Unexpired sessions of a user, newest first"""
        pass
