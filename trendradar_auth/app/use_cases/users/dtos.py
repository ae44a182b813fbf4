"""
User Management DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.domain.entities import UserPreferences, UserRole, UserStatus


class PreferencesInfo(BaseModel):
    language: str
    timezone: str
    two_fa_enabled: bool
    dashboard_layout: Optional[Dict[str, Any]] = None
    notification_settings: Optional[Dict[str, Any]] = None

    @classmethod
    def from_preferences(cls, preferences: UserPreferences) -> "PreferencesInfo":
        return cls(
            language=preferences.language,
            timezone=preferences.timezone,
            two_fa_enabled=preferences.two_fa_enabled,
            dashboard_layout=preferences.dashboard_layout,
            notification_settings=preferences.notification_settings,
        )


class UserDetail(BaseModel):
    user: UserInfo
    preferences: Optional[PreferencesInfo] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class UserListResponse(BaseModel):
    users: List[UserInfo]
    pagination: Pagination


class UpdateUserCommand(BaseModel):
    """Partial update; None leaves a field unchanged"""

    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None


class UpdateUserResponse(BaseModel):
    user: UserInfo
    changed_fields: List[str]
    sessions_revoked: int


class SessionInfo(BaseModel):
    """A live session; the token itself is never returned"""

    id: int
    created_at: datetime
    expires_at: datetime
    current: bool


class RevokeSessionsResponse(BaseModel):
    target_user_id: int
    revoked_count: int
