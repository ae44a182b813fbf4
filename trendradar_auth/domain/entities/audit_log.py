"""
AuditLog Entity

Immutable trail of privileged actions.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field, ForeignKey, Index, Integer, SQLModel

from ..base import utcnow


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - append-only record of a privileged action.

    Business Rules:
    - Immutable (never updated or deleted by the application)
    - user_id nullable for system actions; set to NULL when the user is deleted
    - details holds the structured payload of the action
    """

    __tablename__ = "audit_logs"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    )

    action: str = Field(max_length=100)  # e.g. "CREATE", "UPDATE"
    resource: str = Field(max_length=100)  # e.g. "user"
    resource_id: Optional[int] = Field(default=None)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Request origin
    ip_address: Optional[str] = Field(default=None, max_length=50)
    user_agent: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_user_id", "user_id"),
        Index("idx_audit_action", "action"),
        Index("idx_audit_resource", "resource"),
        Index("idx_audit_created_at", "created_at"),
    )
