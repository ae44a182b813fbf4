import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from trendradar_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from trendradar_auth.app.services.audit_recorder import AuditRecorder
from trendradar_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase
from trendradar_auth.depends import (
    build_engine,
    get_audit_recorder,
    get_password_hasher,
    get_token_codec,
    get_unit_of_work,
)
from trendradar_auth.domain.entities import UserRole, UserStatus

SAMPLE_USERS = [
    ("admin@example.com", "Admin User", "admin123", UserRole.admin),
    ("owner@example.com", "Owner User", "owner123", UserRole.owner),
    ("analyst@example.com", "Analyst User", "analyst123", UserRole.analyst),
    ("viewer@example.com", "Viewer User", "viewer123", UserRole.viewer),
]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def uow(db_session):
    return SqlAlchemyUnitOfWork(db_session)


@pytest_asyncio.fixture
async def seeded_users(uow):
    """The four sample accounts, one per role"""
    use_case = RegisterUseCase(uow, get_password_hasher())
    users = {}
    for email, name, password, role in SAMPLE_USERS:
        result = await use_case.execute(
            RegisterCommand(email=email, name=name, password=password, role=role)
        )
        users[role] = result.value
    return users


@pytest_asyncio.fixture
async def inactive_user(uow):
    result = await RegisterUseCase(uow, get_password_hasher()).execute(
        RegisterCommand(
            email="inactive@example.com",
            name="Inactive User",
            password="inactive123",
            role=UserRole.viewer,
            status=UserStatus.inactive,
        )
    )
    return result.value


@pytest_asyncio.fixture
def token_codec():
    return get_token_codec()


@pytest_asyncio.fixture
async def client(db_session):
    from trendradar_auth.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async def override_get_audit_recorder():
        yield AuditRecorder(SqlAlchemyUnitOfWork(db_session))

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_audit_recorder] = override_get_audit_recorder

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def login(client):
    async def _login(email, password):
        """Log in and return the bearer headers for the new session"""
        response = await client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
