"""
TrendRadar Auth Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Application-wide role of a user"""

    admin = "Admin"
    owner = "Owner"
    analyst = "Analyst"
    viewer = "Viewer"


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    inactive = "inactive"
    suspended = "suspended"
