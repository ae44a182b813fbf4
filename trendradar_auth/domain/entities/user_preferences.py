"""
UserPreferences Entity

Per-user dashboard preferences, provisioned at registration.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field, ForeignKey, Integer, SQLModel

from ..base import utcnow


class UserPreferences(SQLModel, table=True):
    """
    UserPreferences entity - one row per user.

    Business Rules:
    - Created in the same transaction as the user
    - Cascade-deleted with the owning user
    """

    __tablename__ = "user_preferences"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
        )
    )

    language: str = Field(default="EN", max_length=10)
    timezone: str = Field(default="UTC", max_length=50)
    dashboard_layout: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    two_fa_enabled: bool = Field(default=False)
    two_fa_secret: Optional[str] = Field(default=None, max_length=255)
    notification_settings: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
