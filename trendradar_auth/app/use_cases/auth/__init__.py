"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .resolve_identity_use_case import ResolveIdentityUseCase
from .register_use_case import RegisterUseCase
from .cleanup_expired_sessions_use_case import CleanupExpiredSessionsUseCase
from .dtos import (
    CleanupResponse,
    LoginResponse,
    LogoutResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    "ResolveIdentityUseCase",
    "RegisterUseCase",
    "CleanupExpiredSessionsUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "CleanupResponse",
    # DTOs - Nested Models
    "UserInfo",
]
