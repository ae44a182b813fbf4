from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field

from trendradar_auth.api.error import ClientError, ServerError
from trendradar_auth.api.utils.request_info import client_origin
from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth import UserInfo
from trendradar_auth.app.use_cases.users import RevokeSessionsUseCase, SessionInfo
from trendradar_auth.depends import (
    get_audit_recorder,
    get_bearer_token,
    get_current_user,
    get_unit_of_work,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionInfo])
async def list_sessions(
    current_user: UserInfo = Depends(get_current_user),
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Sessions

    Live sessions of the caller, with the current one flagged.
    """
    result = await RevokeSessionsUseCase(uow).list_sessions(current_user, token)
    return result.value


class RevokeAllSessionsRequest(BaseModel):
    """Request to revoke all sessions for a user"""

    user_id: Optional[int] = Field(
        default=None, description="User whose sessions are revoked (defaults to caller)"
    )
    keep_current: bool = Field(
        default=True, description="Keep the caller's current session when revoking own sessions"
    )


class RevokeSessionResponse(BaseModel):
    """Response for session revocation operations"""

    message: str
    revoked_count: int


@router.post(
    "/revoke-all",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionResponse,
)
async def revoke_all_sessions(
    request: RevokeAllSessionsRequest,
    http_request: Request,
    current_user: UserInfo = Depends(get_current_user),
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditRecorder = Depends(get_audit_recorder),
):
    """
    Revoke All Sessions

    Ends every session of a user. Useful for:
    - Security incidents (account compromise)
    - Admin-forced logout

    Authorization:
    - Users can revoke their own sessions
    - Revoking another user's sessions requires Users:update

    Raises:
        - 403 Forbidden: Insufficient permissions
        - 404 Not Found: User not found
    """
    target_user_id = request.user_id if request.user_id is not None else current_user.id
    is_self = target_user_id == current_user.id
    keep_token = token if (is_self and request.keep_current) else None

    use_case = RevokeSessionsUseCase(uow)
    result = await use_case.revoke_all_sessions(target_user_id, current_user, keep_token)

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    data = result.value
    ip_address, user_agent = client_origin(http_request)
    await audit.record(
        current_user.id,
        "REVOKE_SESSIONS",
        "session",
        resource_id=target_user_id,
        details={"revoked_count": data.revoked_count, "is_self": is_self},
        ip_address=ip_address,
        user_agent=user_agent,
    )

    return {
        "message": f"Successfully revoked {data.revoked_count} session(s)",
        "revoked_count": data.revoked_count,
    }
