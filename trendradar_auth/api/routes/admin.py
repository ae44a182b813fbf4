"""
Admin API Routes - User Management

Every endpoint is gated by require_permission(identity, Users, <action>)
and writes an audit entry after a successful change.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from trendradar_auth.api.error import ClientError, ServerError
from trendradar_auth.api.utils.request_info import client_origin
from trendradar_auth.api.utils.validators import check_password_length
from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase, UserInfo
from trendradar_auth.app.use_cases.users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserResponse,
    UpdateUserUseCase,
    UserDetail,
    UserListResponse,
)
from trendradar_auth.depends import (
    get_audit_recorder,
    get_password_hasher,
    get_unit_of_work,
    permission_required,
)
from trendradar_auth.domain.entities import UserRole, UserStatus
from trendradar_auth.domain.permissions import Action, Resource

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, max_length=255),
    role: Optional[UserRole] = None,
    user_status: Optional[UserStatus] = Query(None, alias="status"),
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.view)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Filters: search (email/name substring), role, status. Newest first.
    """
    result = await ListUsersUseCase(uow).execute(
        page=page, limit=limit, search=search, role=role, status=user_status
    )
    return result.value


class CreateUserRequest(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8)
    role: UserRole
    status: UserStatus = UserStatus.active

    @field_validator("password")
    @classmethod
    def password_within_bcrypt_limit(cls, value):
        return check_password_length(value)


class CreateUserResponse(BaseModel):
    message: str
    user: UserInfo


@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse)
async def create_user(
    request: CreateUserRequest,
    http_request: Request,
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.create)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    audit: AuditRecorder = Depends(get_audit_recorder),
):
    """
    Create User

    Raises:
        - 409 Conflict: ALREADY_EXISTS
    """
    command = RegisterCommand(**request.model_dump())
    result = await RegisterUseCase(uow, hasher).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    user = result.value
    ip_address, user_agent = client_origin(http_request)
    await audit.record(
        current_user.id,
        "CREATE",
        "user",
        resource_id=user.id,
        details={"email": user.email, "name": user.name, "role": user.role.value},
        ip_address=ip_address,
        user_agent=user_agent,
    )
    return {"message": "User created successfully", "user": user}


@router.get("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetail)
async def get_user(
    user_id: int,
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.view)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get User

    Raises:
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class UpdateUserRequest(BaseModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    password: Optional[str] = Field(default=None, min_length=8)
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None

    @field_validator("password")
    @classmethod
    def password_within_bcrypt_limit(cls, value):
        return check_password_length(value)


@router.put("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UpdateUserResponse)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    http_request: Request,
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.update)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    audit: AuditRecorder = Depends(get_audit_recorder),
):
    """
    Update User

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: EMAIL_IN_USE
    """
    command = UpdateUserCommand(**request.model_dump())
    result = await UpdateUserUseCase(uow, hasher).execute(user_id, command)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "EMAIL_IN_USE":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    data = result.value
    ip_address, user_agent = client_origin(http_request)
    await audit.record(
        current_user.id,
        "UPDATE",
        "user",
        resource_id=user_id,
        details={
            "changed_fields": data.changed_fields,
            "role": data.user.role.value,
            "status": data.user.status.value,
            "sessions_revoked": data.sessions_revoked,
        },
        ip_address=ip_address,
        user_agent=user_agent,
    )
    return data


class DeleteUserResponse(BaseModel):
    message: str


@router.delete(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse
)
async def delete_user(
    user_id: int,
    http_request: Request,
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.delete)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditRecorder = Depends(get_audit_recorder),
):
    """
    Delete User

    Raises:
        - 400 Bad Request: CANNOT_DELETE_SELF
        - 404 Not Found: USER_NOT_FOUND
    """
    result = await DeleteUserUseCase(uow).execute(user_id, current_user.id)

    if result.is_err():
        error = result.error
        if error.code == "CANNOT_DELETE_SELF":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    deleted = result.value
    ip_address, user_agent = client_origin(http_request)
    await audit.record(
        current_user.id,
        "DELETE",
        "user",
        resource_id=user_id,
        details={"email": deleted.email},
        ip_address=ip_address,
        user_agent=user_agent,
    )
    return {"message": "User deleted successfully"}
