"""
Session Entity

Binds an issued access token to a user until it expires or is revoked.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, ForeignKey, Index, Integer, SQLModel

from ..base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - one issued, revocable access token.

    Business Rules:
    - Token is unique and belongs to exactly one user
    - Expired rows (now >= expires_at) are treated as absent until swept
    - Deleted on logout, on "revoke all" and by the expiry sweep
    - Cascade-deleted with the owning user
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: int = Field(
        sa_column=Column(
            Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
        )
    )
    token: str = Field(unique=True, index=True, max_length=512)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
