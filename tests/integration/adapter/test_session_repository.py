from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from trendradar_auth.domain.base import utcnow
from trendradar_auth.domain.entities import AuditLog, Session, UserPreferences


async def _add_session(uow, user_id, token, expires_in):
    async with uow:
        session = await uow.sessions.create(
            Session(user_id=user_id, token=token, expires_at=utcnow() + expires_in)
        )
        await uow.commit()
    return session


@pytest.mark.asyncio
async def test_find_valid_ignores_expired_rows(uow, seeded_users):
    user = seeded_users["Viewer"]
    await _add_session(uow, user.id, "live-token", timedelta(hours=1))
    await _add_session(uow, user.id, "stale-token", timedelta(seconds=-1))

    async with uow:
        assert (await uow.sessions.find_valid("live-token")).user_id == user.id
        assert await uow.sessions.find_valid("stale-token") is None
        assert await uow.sessions.find_valid("never-issued") is None


@pytest.mark.asyncio
async def test_delete_expired_is_reentrant(uow, seeded_users):
    user = seeded_users["Analyst"]
    await _add_session(uow, user.id, "live-token", timedelta(hours=1))
    await _add_session(uow, user.id, "stale-1", timedelta(minutes=-5))
    await _add_session(uow, user.id, "stale-2", timedelta(days=-1))

    async with uow:
        first = await uow.sessions.delete_expired()
        await uow.commit()
    async with uow:
        second = await uow.sessions.delete_expired()
        await uow.commit()

    assert first == 2
    assert second == 0
    async with uow:
        assert await uow.sessions.find_valid("live-token") is not None


@pytest.mark.asyncio
async def test_delete_by_token_is_idempotent(uow, seeded_users):
    await _add_session(uow, seeded_users["Owner"].id, "owner-token", timedelta(hours=1))

    async with uow:
        assert await uow.sessions.delete_by_token("owner-token") == 1
        assert await uow.sessions.delete_by_token("owner-token") == 0
        await uow.commit()


@pytest.mark.asyncio
async def test_delete_all_for_user_keeps_excepted_token(uow, seeded_users):
    admin = seeded_users["Admin"]
    viewer = seeded_users["Viewer"]
    for token in ("a-1", "a-2", "a-3"):
        await _add_session(uow, admin.id, token, timedelta(hours=1))
    await _add_session(uow, viewer.id, "v-1", timedelta(hours=1))

    async with uow:
        removed = await uow.sessions.delete_all_for_user(admin.id, except_token="a-2")
        await uow.commit()

    assert removed == 2
    async with uow:
        remaining = await uow.sessions.list_active_for_user(admin.id)
        assert [s.token for s in remaining] == ["a-2"]
        assert await uow.sessions.find_valid("v-1") is not None


@pytest.mark.asyncio
async def test_duplicate_token_violates_unique_constraint(uow, seeded_users):
    user_id = seeded_users["Viewer"].id
    await _add_session(uow, user_id, "dup-token", timedelta(hours=1))

    with pytest.raises(IntegrityError):
        await _add_session(uow, user_id, "dup-token", timedelta(hours=1))


@pytest.mark.asyncio
async def test_deleting_user_removes_sessions_and_keeps_audit(uow, db_session, seeded_users):
    viewer = seeded_users["Viewer"]
    await _add_session(uow, viewer.id, "viewer-token", timedelta(hours=1))
    async with uow:
        await uow.audit_logs.create(AuditLog(user_id=viewer.id, action="LOGIN", resource="session"))
        await uow.commit()

    async with uow:
        user = await uow.users.get_by_id(viewer.id)
        await uow.users.delete(user)
        await uow.commit()

    async with uow:
        assert await uow.sessions.find_valid("viewer-token") is None
        assert await uow.preferences.get_by_user_id(viewer.id) is None
        stmt = select(AuditLog).execution_options(populate_existing=True)
        entries = (await db_session.exec(stmt)).all()
        assert len(entries) == 1
        assert entries[0].user_id is None


@pytest.mark.asyncio
async def test_registration_provisions_preferences(uow, seeded_users):
    async with uow:
        preferences = await uow.preferences.get_by_user_id(seeded_users["Owner"].id)

        assert isinstance(preferences, UserPreferences)
        assert preferences.language == "EN"
        assert preferences.timezone == "UTC"
        assert preferences.two_fa_enabled is False
