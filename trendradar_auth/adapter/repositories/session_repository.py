from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from trendradar_auth.adapter.repositories.storage import guarded
from trendradar_auth.app.repositories.session_repository import ISessionRepository
from trendradar_auth.domain.base import utcnow
from trendradar_auth.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session store implementation using SQLModel"""

    def __init__(self, session: AsyncSession, default_timeout: Optional[float] = None):
        self.session = session
        self.default_timeout = default_timeout

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return self.default_timeout if timeout is None else timeout

    async def create(self, session_obj: Session, timeout: Optional[float] = None) -> Session:
        """Insert a new session"""

        async def _create():
            self.session.add(session_obj)
            await self.session.flush()
            await self.session.refresh(session_obj)
            return session_obj

        return await guarded(_create(), self._timeout(timeout))

    async def find_valid(self, token: str, timeout: Optional[float] = None) -> Optional[Session]:
        """
        Find an unexpired session by its token.

        An expired row that has not been swept yet is reported as absent.
        """
        stmt = select(Session).where(Session.token == token, Session.expires_at > utcnow())

        async def _find():
            result = await self.session.exec(stmt)
            return result.one_or_none()

        return await guarded(_find(), self._timeout(timeout))

    async def delete_by_token(self, token: str, timeout: Optional[float] = None) -> int:
        """Delete the session for a token (idempotent)"""
        stmt = delete(Session).where(Session.token == token)
        return await self._delete(stmt, timeout)

    async def delete_all_for_user(
        self, user_id: int, except_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> int:
        """Delete all sessions for a user, optionally keeping one token"""
        stmt = delete(Session).where(Session.user_id == user_id)
        if except_token is not None:
            stmt = stmt.where(Session.token != except_token)
        return await self._delete(stmt, timeout)

    async def delete_expired(self, timeout: Optional[float] = None) -> int:
        """Delete every session with expires_at <= now"""
        stmt = delete(Session).where(Session.expires_at <= utcnow())
        return await self._delete(stmt, timeout)

    async def list_active_for_user(
        self, user_id: int, timeout: Optional[float] = None
    ) -> List[Session]:
        """Unexpired sessions of a user, newest first"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id, Session.expires_at > utcnow())
            .order_by(Session.created_at.desc())
        )

        async def _list():
            result = await self.session.exec(stmt)
            return list(result.all())

        return await guarded(_list(), self._timeout(timeout))

    async def _delete(self, stmt, timeout: Optional[float]) -> int:
        async def _run():
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0

        return await guarded(_run(), self._timeout(timeout))
