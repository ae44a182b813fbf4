import pytest

from trendradar_auth.app.use_cases.auth import ResolveIdentityUseCase
from trendradar_auth.domain.base import utcnow
from trendradar_auth.domain.entities import Session, UserRole, UserStatus


def _session_for(user, token):
    return Session(id=1, user_id=user.id, token=token, expires_at=utcnow(), created_at=utcnow())


@pytest.mark.asyncio
async def test_resolves_user_for_live_session(mock_uow, token_codec, make_user):
    user = make_user(user_id=3, role=UserRole.analyst)
    token = token_codec.issue(user.id, user.email, user.role.value).token
    mock_uow.sessions.find_valid.return_value = _session_for(user, token)
    mock_uow.users.get_by_id.return_value = user

    result = await ResolveIdentityUseCase(mock_uow, token_codec).execute(token)

    assert result.is_ok()
    assert result.value.id == 3
    assert result.value.role == UserRole.analyst
    mock_uow.sessions.find_valid.assert_called_once_with(token)
    mock_uow.users.get_by_id.assert_called_once_with(3)


@pytest.mark.asyncio
async def test_invalid_token_skips_storage(mock_uow, token_codec):
    result = await ResolveIdentityUseCase(mock_uow, token_codec).execute("garbage")

    assert result.is_err()
    assert result.error.code == "TOKEN_INVALID"
    mock_uow.sessions.find_valid.assert_not_called()


@pytest.mark.asyncio
async def test_valid_token_without_session_is_rejected(mock_uow, token_codec, make_user):
    """A logged-out token still verifies but has no session row"""
    user = make_user()
    token = token_codec.issue(user.id, user.email, user.role.value).token
    mock_uow.sessions.find_valid.return_value = None

    result = await ResolveIdentityUseCase(mock_uow, token_codec).execute(token)

    assert result.is_err()
    assert result.error.code == "SESSION_NOT_FOUND"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_deleted_user_is_rejected(mock_uow, token_codec, make_user):
    user = make_user()
    token = token_codec.issue(user.id, user.email, user.role.value).token
    mock_uow.sessions.find_valid.return_value = _session_for(user, token)
    mock_uow.users.get_by_id.return_value = None

    result = await ResolveIdentityUseCase(mock_uow, token_codec).execute(token)

    assert result.is_err()


@pytest.mark.asyncio
async def test_suspended_user_is_rejected(mock_uow, token_codec, make_user):
    user = make_user(status=UserStatus.suspended)
    token = token_codec.issue(user.id, user.email, user.role.value).token
    mock_uow.sessions.find_valid.return_value = _session_for(user, token)
    mock_uow.users.get_by_id.return_value = user

    assert await ResolveIdentityUseCase(mock_uow, token_codec).resolve(token) is None


@pytest.mark.asyncio
async def test_role_is_read_from_storage_not_token(mock_uow, token_codec, make_user):
    """A demoted user resolves with the new role even on an old token"""
    user = make_user(role=UserRole.admin)
    token = token_codec.issue(user.id, user.email, "Admin").token
    user.role = UserRole.viewer
    mock_uow.sessions.find_valid.return_value = _session_for(user, token)
    mock_uow.users.get_by_id.return_value = user

    identity = await ResolveIdentityUseCase(mock_uow, token_codec).resolve(token)

    assert identity.role == UserRole.viewer
