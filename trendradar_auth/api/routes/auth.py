from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from trendradar_auth.api.error import ClientError, ServerError
from trendradar_auth.api.utils.request_info import client_origin
from trendradar_auth.api.utils.validators import check_password_length
from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.token_codec import TokenCodec
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from trendradar_auth.depends import (
    get_audit_recorder,
    get_bearer_token,
    get_current_user,
    get_password_hasher,
    get_token_codec,
    get_unit_of_work,
    permission_required,
)
from trendradar_auth.domain.entities import UserRole
from trendradar_auth.domain.permissions import (
    Action,
    Resource,
    can_access_resource,
    get_role_permissions,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Plain strings: a malformed email must fail exactly like a wrong one.
    """

    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_codec: TokenCodec = Depends(get_token_codec),
):
    """
    User Login

    Authenticates by email and password and opens a 7-day session.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (unknown email, inactive
          account or wrong password, indistinguishable)
        - 503 Service Unavailable: session store unavailable
    """
    use_case = LoginUseCase(uow, hasher, token_codec)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class LogoutResponseModel(BaseModel):
    message: str


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponseModel)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Logout

    Ends the session of the bearer token. Always succeeds, including for
    missing, unknown or already expired tokens.
    """
    if token:
        await LogoutUseCase(uow).execute(token)
    return {"message": "Logged out successfully"}


class MeResponse(BaseModel):
    """GET /auth/me response payload"""

    user: UserInfo


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(current_user: UserInfo = Depends(get_current_user)):
    """
    Current User

    Raises:
        - 401 Unauthorized: missing/invalid/expired token or ended session
    """
    return {"user": current_user}


class RegisterRequest(BaseModel):
    """Register HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    role: UserRole = Field(..., description="Admin, Owner, Analyst or Viewer")

    @field_validator("password")
    @classmethod
    def password_within_bcrypt_limit(cls, value):
        return check_password_length(value)


class RegisterResponse(BaseModel):
    user: UserInfo


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    http_request: Request,
    current_user: UserInfo = Depends(permission_required(Resource.users, Action.create)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    audit: AuditRecorder = Depends(get_audit_recorder),
):
    """
    Register User (Admin only)

    Creates the account and its default preferences atomically.

    Raises:
        - 401 Unauthorized: not authenticated
        - 403 Forbidden: caller lacks Users:create
        - 409 Conflict: ALREADY_EXISTS
        - 422 Unprocessable Entity: invalid input (handled by FastAPI)
    """
    command = RegisterCommand(
        email=request.email, name=request.name, password=request.password, role=request.role
    )
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
    return {"user": user}


class PermissionEntry(BaseModel):
    resource: str
    action: str


class PermissionsResponse(BaseModel):
    role: str
    permissions: List[PermissionEntry]
    resources: List[str]


@router.get("/permissions", status_code=status.HTTP_200_OK, response_model=PermissionsResponse)
async def get_my_permissions(current_user: UserInfo = Depends(get_current_user)):
    """
    Capabilities of the caller's role, for UI introspection (not enforcement).
    """
    permissions = get_role_permissions(current_user.role)
    return {
        "role": current_user.role.value,
        "permissions": [
            {"resource": p.resource.value, "action": p.action.value} for p in permissions
        ],
        "resources": [r.value for r in Resource if can_access_resource(current_user.role, r)],
    }
