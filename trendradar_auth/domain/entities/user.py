"""
User Entity

Represents an account of the analytics dashboard.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - an account that can sign in to the dashboard.

    Business Rules:
    - Email must be unique across all users (stored lower-cased)
    - Password stored as bcrypt hash, never exposed outside auth use cases
    - Only status=active users can authenticate
    - Role and status changes are Admin-only
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    password_hash: str = Field(max_length=255)

    role: UserRole = Field(default=UserRole.viewer)
    status: UserStatus = Field(default=UserStatus.active)

    # Timestamps
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_role", "role"),
        Index("idx_user_status", "status"),
    )
