"""
User Management Use Cases

All user-related business logic.
"""

from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .revoke_sessions_use_case import RevokeSessionsUseCase
from .dtos import (
    Pagination,
    PreferencesInfo,
    RevokeSessionsResponse,
    SessionInfo,
    UpdateUserCommand,
    UpdateUserResponse,
    UserDetail,
    UserListResponse,
)

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "RevokeSessionsUseCase",
    "Pagination",
    "PreferencesInfo",
    "RevokeSessionsResponse",
    "SessionInfo",
    "UpdateUserCommand",
    "UpdateUserResponse",
    "UserDetail",
    "UserListResponse",
]
