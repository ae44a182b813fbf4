from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.token_codec import TokenCodec
from trendradar_auth.domain.base import utcnow
from trendradar_auth.domain.entities import User, UserRole, UserStatus


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()
    uow.users.delete = AsyncMock()
    uow.users.count = AsyncMock(return_value=0)
    uow.users.list_paginated = AsyncMock(return_value=([], 0))

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.find_valid = AsyncMock()
    uow.sessions.delete_by_token = AsyncMock(return_value=0)
    uow.sessions.delete_all_for_user = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)
    uow.sessions.list_active_for_user = AsyncMock(return_value=[])

    uow.preferences = MagicMock()
    uow.preferences.create = AsyncMock()
    uow.preferences.get_by_user_id = AsyncMock()

    uow.audit_logs = MagicMock()
    uow.audit_logs.create = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_codec():
    return TokenCodec("unit-test-secret", ttl=timedelta(days=7))


@pytest.fixture
def make_user(hasher):
    """Build a persisted-looking User with a real bcrypt hash"""

    def _make(
        user_id=1,
        email="user@example.com",
        password="correct-password",
        role=UserRole.viewer,
        status=UserStatus.active,
    ):
        now = utcnow()
        return User(
            id=user_id,
            email=email,
            name=email.split("@")[0].title(),
            password_hash=hasher.hash(password),
            role=role,
            status=status,
            created_at=now,
            updated_at=now,
        )

    return _make
