import asyncio

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from trendradar_auth.adapter.repositories.storage import guarded
from trendradar_auth.domain.exceptions import StorageError


async def _never_completes():
    await asyncio.Event().wait()


async def _fails_with(exc):
    raise exc


@pytest.mark.asyncio
async def test_deadline_exceeded_raises_storage_error():
    with pytest.raises(StorageError, match="0.01s"):
        await guarded(_never_completes(), timeout=0.01)


@pytest.mark.asyncio
async def test_driver_error_becomes_storage_error():
    error = OperationalError("SELECT 1", {}, Exception("database is locked"))

    with pytest.raises(StorageError):
        await guarded(_fails_with(error), timeout=1)


@pytest.mark.asyncio
async def test_constraint_violation_propagates_unchanged():
    error = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    with pytest.raises(IntegrityError):
        await guarded(_fails_with(error), timeout=None)


@pytest.mark.asyncio
async def test_result_is_returned_within_deadline():
    async def _value():
        return 7

    assert await guarded(_value(), timeout=1) == 7
