import pytest

from trendradar_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase
from trendradar_auth.depends import get_password_hasher
from trendradar_auth.domain.entities import UserRole


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(uow, seeded_users):
    await RegisterUseCase(uow, get_password_hasher()).execute(
        RegisterCommand(
            email="data_ops@example.com",
            name="100% Ops",
            password="password123",
            role=UserRole.analyst,
        )
    )

    async with uow:
        percent, percent_total = await uow.users.list_paginated(search="%")
        underscore, _ = await uow.users.list_paginated(search="_")
        literal, _ = await uow.users.list_paginated(search="a_o")

    assert percent_total == 1
    assert [u.email for u in percent] == ["data_ops@example.com"]
    assert [u.email for u in underscore] == ["data_ops@example.com"]
    assert [u.email for u in literal] == ["data_ops@example.com"]


@pytest.mark.asyncio
async def test_search_matches_email_or_name(uow, seeded_users):
    async with uow:
        by_name, _ = await uow.users.list_paginated(search="Owner User")
        by_email, total = await uow.users.list_paginated(search="example.com")

    assert [u.email for u in by_name] == ["owner@example.com"]
    assert total == 4
