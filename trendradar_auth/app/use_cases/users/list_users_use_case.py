"""
List Users Use Case
"""

import math
from typing import Optional

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.domain.entities import UserRole, UserStatus
from trendradar_auth.libs.result import Result, Return
from .dtos import Pagination, UserListResponse


class ListUsersUseCase:
    """Paginated, filterable user listing for the admin surface"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
    ) -> Result[UserListResponse]:
        page = max(page, 1)
        limit = min(max(limit, 1), 100)

        async with self.uow:
            users, total = await self.uow.users.list_paginated(
                page=page, limit=limit, search=search, role=role, status=status
            )
            # Project before the unit of work ends; its rollback expires the rows
            items = [UserInfo.from_user(u) for u in users]

        return Return.ok(
            UserListResponse(
                users=items,
                pagination=Pagination(
                    page=page,
                    limit=limit,
                    total=total,
                    pages=math.ceil(total / limit),
                ),
            )
        )
