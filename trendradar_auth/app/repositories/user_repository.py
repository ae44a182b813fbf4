from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from trendradar_auth.domain.entities import User, UserRole, UserStatus


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete user together with its sessions and preferences"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of users"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
    ) -> Tuple[List[User], int]:
        """
        List users newest first.

        Returns:
            Tuple of (users on the requested page, total matching users)
        """
        pass
