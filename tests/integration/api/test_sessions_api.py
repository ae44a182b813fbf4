import pytest
from sqlmodel import select

from trendradar_auth.domain.entities import AuditLog


@pytest.mark.asyncio
async def test_list_my_sessions(client, login, seeded_users):
    first = await login("owner@example.com", "owner123")
    await login("owner@example.com", "owner123")

    response = await client.get("/sessions", headers=first)

    assert response.status_code == 200
    sessions = response.json()
    assert len(sessions) == 2
    assert sum(s["current"] for s in sessions) == 1
    assert all("token" not in s for s in sessions)


@pytest.mark.asyncio
async def test_revoke_own_sessions_keeps_current(client, login, seeded_users):
    current = await login("analyst@example.com", "analyst123")
    other = await login("analyst@example.com", "analyst123")

    response = await client.post("/sessions/revoke-all", json={}, headers=current)

    assert response.status_code == 200
    assert response.json() == {"message": "Successfully revoked 1 session(s)", "revoked_count": 1}
    assert (await client.get("/auth/me", headers=current)).status_code == 200
    assert (await client.get("/auth/me", headers=other)).status_code == 401


@pytest.mark.asyncio
async def test_revoke_own_sessions_including_current(client, login, seeded_users):
    current = await login("analyst@example.com", "analyst123")

    response = await client.post(
        "/sessions/revoke-all", json={"keep_current": False}, headers=current
    )

    assert response.json()["revoked_count"] == 1
    assert (await client.get("/auth/me", headers=current)).status_code == 401


@pytest.mark.asyncio
async def test_admin_revokes_other_user(client, db_session, login, seeded_users):
    viewer = await login("viewer@example.com", "viewer123")
    admin = await login("admin@example.com", "admin123")

    response = await client.post(
        "/sessions/revoke-all", json={"user_id": seeded_users["Viewer"].id}, headers=admin
    )

    assert response.status_code == 200
    assert response.json()["revoked_count"] == 1
    assert (await client.get("/auth/me", headers=viewer)).status_code == 401
    assert (await client.get("/auth/me", headers=admin)).status_code == 200

    entry = (await db_session.exec(select(AuditLog))).one()
    assert entry.action == "REVOKE_SESSIONS"
    assert entry.resource == "session"
    assert entry.resource_id == seeded_users["Viewer"].id
    assert entry.details == {"revoked_count": 1, "is_self": False}


@pytest.mark.asyncio
async def test_non_admin_cannot_revoke_others(client, login, seeded_users):
    owner = await login("owner@example.com", "owner123")

    response = await client.post(
        "/sessions/revoke-all", json={"user_id": seeded_users["Viewer"].id}, headers=owner
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_revoke_for_unknown_user(client, login, seeded_users):
    admin = await login("admin@example.com", "admin123")

    response = await client.post("/sessions/revoke-all", json={"user_id": 9999}, headers=admin)

    assert response.status_code == 404
