from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from trendradar_auth.app.repositories.user_repository import IUserRepository
from trendradar_auth.domain.entities import (
    Session,
    User,
    UserPreferences,
    UserRole,
    UserStatus,
)


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete user and the rows it owns"""
        await self.session.execute(delete(Session).where(Session.user_id == user.id))
        await self.session.execute(
            delete(UserPreferences).where(UserPreferences.user_id == user.id)
        )
        await self.session.delete(user)
        await self.session.flush()

    async def count(self) -> int:
        """Total number of users"""
        result = await self.session.exec(select(func.count()).select_from(User))
        return result.one()

    async def list_paginated(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
    ) -> Tuple[List[User], int]:
        """List users newest first with optional filters"""
        stmt = select(User)

        if search:
            pattern = f"%{_escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    col(User.email).like(pattern, escape="\\"),
                    col(User.name).like(pattern, escape="\\"),
                )
            )
        if role is not None:
            stmt = stmt.where(User.role == role)
        if status is not None:
            stmt = stmt.where(User.status == status)

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.exec(count_stmt)).one()

        offset = (page - 1) * limit
        stmt = stmt.order_by(col(User.created_at).desc(), col(User.id).desc())
        stmt = stmt.offset(offset).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all()), total


def _escape_like(term: str) -> str:
    # Search terms match literally; % and _ are not wildcards
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
