#!/usr/bin/env python3
"""Seed the sample Admin/Owner/Analyst/Viewer accounts.

Creates the schema if needed, then registers each sample user through
RegisterUseCase. Existing emails are skipped.

Usage: python scripts/seed_users.py
"""

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import SQLModel

from config import ApplicationConfig
from trendradar_auth.api.log_config import configure_logging
from trendradar_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase
from trendradar_auth.depends import engine, get_password_hasher, unit_of_work_scope
from trendradar_auth.domain.entities import UserRole

logger = logging.getLogger("seed_users")

SAMPLE_USERS = [
    ("admin@example.com", "Admin User", UserRole.admin, "admin123"),
    ("owner@example.com", "Account Owner", UserRole.owner, "owner123"),
    ("analyst@example.com", "Data Analyst", UserRole.analyst, "analyst123"),
    ("viewer@example.com", "Viewer User", UserRole.viewer, "viewer123"),
]


async def seed_users() -> int:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    hasher = get_password_hasher()
    created = 0
    for email, name, role, password in SAMPLE_USERS:
        async with unit_of_work_scope() as uow:
            result = await RegisterUseCase(uow, hasher).execute(
                RegisterCommand(email=email, name=name, password=password, role=role)
            )
        if result.is_ok():
            created += 1
            logger.info("Created %s (%s)", email, role.value)
        elif result.error.code == "ALREADY_EXISTS":
            logger.info("Skipped %s: already exists", email)
        else:
            logger.error("Failed to create %s: %s", email, result.error.message)

    await engine.dispose()
    return created


if __name__ == "__main__":
    configure_logging(ApplicationConfig.LOG_LEVEL)
    count = asyncio.run(seed_users())
    logger.info("Seeded %d user(s)", count)
