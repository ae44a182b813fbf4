"""
Use Cases

Organized by area:
- auth/: login, logout, identity resolution, registration, session cleanup
- users/: user administration and session revocation
"""

from .auth import (
    CleanupExpiredSessionsUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
    ResolveIdentityUseCase,
)
from .users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RevokeSessionsUseCase,
    UpdateUserUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    "ResolveIdentityUseCase",
    "RegisterUseCase",
    "CleanupExpiredSessionsUseCase",
    # Users
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "RevokeSessionsUseCase",
]
