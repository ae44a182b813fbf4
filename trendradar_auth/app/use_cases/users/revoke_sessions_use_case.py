"""
Revoke Sessions Use Case

Handles session listing and revocation ("log out everywhere").
"""

from typing import List, Optional

from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth.dtos import UserInfo
from trendradar_auth.domain.permissions import Action, Resource, has_permission
from trendradar_auth.libs.result import Error, Result, Return
from .dtos import RevokeSessionsResponse, SessionInfo


class RevokeSessionsUseCase:
    """
    Use case for revoking user sessions.

    Business Rules:
    - Users can revoke their own sessions
    - Revoking another user's sessions requires Users:update
    - keep_token preserves the caller's current session
    - Revocation is audit-logged by the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def revoke_all_sessions(
        self,
        target_user_id: int,
        requester: UserInfo,
        keep_token: Optional[str] = None,
    ) -> Result[RevokeSessionsResponse]:
        """
        Revoke all sessions for a user.

        Args:
            target_user_id: User whose sessions will be revoked
            requester: Resolved identity of the caller
            keep_token: Token whose session survives (usually the caller's)

        Returns:
            Result with count of revoked sessions, or Error
        """
        is_self = target_user_id == requester.id
        if not is_self and not has_permission(requester.role, Resource.users, Action.update):
            return Return.err(
                Error("FORBIDDEN", "Only admins can revoke other users' sessions")
            )

        async with self.uow:
            target_user = await self.uow.users.get_by_id(target_user_id)
            if not target_user:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            count = await self.uow.sessions.delete_all_for_user(
                target_user_id, except_token=keep_token
            )
            await self.uow.commit()

        return Return.ok(
            RevokeSessionsResponse(target_user_id=target_user_id, revoked_count=count)
        )

    async def list_sessions(
        self, requester: UserInfo, current_token: str
    ) -> Result[List[SessionInfo]]:
        """Live sessions of the caller; the current one is flagged"""
        async with self.uow:
            sessions = await self.uow.sessions.list_active_for_user(requester.id)

            return Return.ok(
                [
                    SessionInfo(
                        id=s.id,
                        created_at=s.created_at,
                        expires_at=s.expires_at,
                        current=s.token == current_token,
                    )
                    for s in sessions
                ]
            )
