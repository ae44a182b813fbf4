"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from trendradar_auth.domain.entities import User, UserRole, UserStatus


# ============================================================================
# Shared DTOs
# ============================================================================


class UserInfo(BaseModel):
    """
    Public projection of a user (the resolved identity).

    Never carries the password hash.
    """

    id: int
    email: str
    name: str
    role: UserRole
    status: UserStatus
    last_login_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            status=user.status,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated intent to create a new account"""

    email: str
    name: str
    password: str
    role: UserRole
    status: UserStatus = UserStatus.active


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserInfo
    token: str
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    sessions_removed: int


class CleanupResponse(BaseModel):
    """Response for the expired session sweep"""

    removed: int
