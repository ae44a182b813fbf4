from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.domain.entities import AuditLog
from trendradar_auth.domain.exceptions import StorageError


@pytest.mark.asyncio
async def test_record_appends_entry(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)

    entry = await AuditRecorder(mock_uow).record(
        1,
        "CREATE",
        "user",
        resource_id=5,
        details={"email": "new@example.com"},
        ip_address="10.0.0.1",
        user_agent="pytest",
    )

    assert isinstance(entry, AuditLog)
    assert entry.user_id == 1
    assert entry.action == "CREATE"
    assert entry.resource == "user"
    assert entry.resource_id == 5
    assert entry.details == {"email": "new@example.com"}
    assert entry.ip_address == "10.0.0.1"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_record_allows_system_actor(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)

    entry = await AuditRecorder(mock_uow).record(None, "SWEEP", "session")

    assert entry.user_id is None


@pytest.mark.asyncio
async def test_storage_failure_is_logged_not_raised(mock_uow, caplog):
    mock_uow.audit_logs.create = AsyncMock(side_effect=StorageError("down"))

    with caplog.at_level("ERROR"):
        entry = await AuditRecorder(mock_uow).record(1, "DELETE", "user", resource_id=3)

    assert entry is None
    assert "Audit write failed" in caplog.text
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_commit_failure_is_logged_not_raised(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)
    mock_uow.commit = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("locked")))

    entry = await AuditRecorder(mock_uow).record(1, "UPDATE", "user", resource_id=3)

    assert entry is None


@pytest.mark.asyncio
async def test_long_user_agent_is_truncated(mock_uow):
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)

    entry = await AuditRecorder(mock_uow).record(1, "CREATE", "user", user_agent="x" * 900)

    assert len(entry.user_agent) == 500
