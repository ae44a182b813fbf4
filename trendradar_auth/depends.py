from contextlib import asynccontextmanager
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from trendradar_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from trendradar_auth.api.error import AUTH_REQUIRED, TOKEN_INVALID, ClientError
from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.app.services.authorization import require_permission
from trendradar_auth.app.services.password_hasher import PasswordHasher
from trendradar_auth.app.services.token_codec import TokenCodec
from trendradar_auth.app.services.unit_of_work import UnitOfWork
from trendradar_auth.app.use_cases.auth import ResolveIdentityUseCase, UserInfo
from trendradar_auth.domain.permissions import Action, Resource


def build_engine(db_uri: str) -> AsyncEngine:
    engine = create_async_engine(db_uri, echo=False, future=True)
    if db_uri.startswith("sqlite"):
        # SQLite leaves FK actions (CASCADE / SET NULL) off unless asked
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


@asynccontextmanager
async def unit_of_work_scope():
    """A unit of work on its own session, for work outside a request"""
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, ApplicationConfig.STORAGE_TIMEOUT_SECONDS)


async def get_unit_of_work():
    async with unit_of_work_scope() as uow:
        yield uow


async def get_audit_recorder():
    # Separate session so a failed audit write cannot touch the request's transaction
    async with unit_of_work_scope() as uow:
        yield AuditRecorder(uow)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=ApplicationConfig.PASSWORD_HASH_ROUNDS)


@lru_cache
def get_token_codec() -> TokenCodec:
    return TokenCodec(
        ApplicationConfig.JWT_SECRET,
        ttl=timedelta(days=ApplicationConfig.TOKEN_TTL_DAYS),
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: TokenCodec = Depends(get_token_codec),
) -> UserInfo:
    """
    Dependency resolving the bearer token to the calling user.

    Returns:
        UserInfo of the caller, freshly loaded for this request

    Raises:
        ClientError: 401 if the token is missing, invalid, expired or its
        session is gone
    """
    if not token:
        raise ClientError(AUTH_REQUIRED, status_code=status.HTTP_401_UNAUTHORIZED)

    result = await ResolveIdentityUseCase(uow, token_codec).execute(token)
    if result.is_err():
        raise ClientError(TOKEN_INVALID, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value


def permission_required(resource: Resource, action: Action):
    """Dependency factory: the caller, after require_permission passed"""

    async def _dependency(current_user: UserInfo = Depends(get_current_user)) -> UserInfo:
        require_permission(current_user, resource, action)
        return current_user

    return _dependency
