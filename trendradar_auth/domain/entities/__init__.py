"""
TrendRadar Auth Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import UserRole, UserStatus

# Export all entities
from .user import User
from .session import Session
from .user_preferences import UserPreferences
from .audit_log import AuditLog

__all__ = [
    # Enums
    "UserRole",
    "UserStatus",
    # Entities
    "User",
    "Session",
    "UserPreferences",
    "AuditLog",
]
