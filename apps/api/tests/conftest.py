"""
Pytest fixtures for testing.

Provides:
- Async database session on an in-memory SQLite database
- Test client with the database dependency overridden
- Users for each role and their auth headers
- Valid request payloads for every resource
"""

from typing import Any, AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from fabtrack.main import app
from fabtrack.models.base import Base
from fabtrack.models.user import User
from fabtrack.api.dependencies.database import get_db
from fabtrack.core.auth import Role
from fabtrack.services.auth import create_access_token, hash_password

# Importing the models registers every table on Base.metadata
import fabtrack.models  # noqa: F401


# Test database URL (SQLite in-memory for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create database session with automatic rollback.

    Requests made through ``client`` share this session, so data flushed by
    one request is visible to the next.
    """
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client with database session override.
    """

    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============ Factory Fixtures ============


class UserFactory:
    """Factory for creating test users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        email: str | None = None,
        password: str = "testpassword123",
        name: str = "Test User",
        role: Role = Role.USER,
        is_active: bool = True,
    ) -> User:
        """Create a user in the database."""
        user = User(
            email=email or f"test-{uuid4().hex[:8]}@example.com",
            password_hash=hash_password(password),
            name=name,
            role=role.value,
            is_active=is_active,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user


@pytest_asyncio.fixture
async def user_factory(db: AsyncSession) -> UserFactory:
    """Fixture that provides UserFactory."""
    return UserFactory(db)


@pytest_asyncio.fixture
async def admin_user(user_factory: UserFactory) -> User:
    return await user_factory.create(
        email="admin@example.com",
        name="Admin User",
        role=Role.ADMIN,
    )


@pytest_asyncio.fixture
async def manager_user(user_factory: UserFactory) -> User:
    return await user_factory.create(
        email="manager@example.com",
        name="Manager User",
        role=Role.MANAGER,
    )


@pytest_asyncio.fixture
async def test_user(user_factory: UserFactory) -> User:
    """Create a standard test user."""
    return await user_factory.create(email="user@example.com")


# ============ Auth Helpers ============


def get_auth_headers(user: User) -> dict[str, str]:
    """Helper to get auth headers for any user."""
    token = create_access_token(user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin_headers(admin_user: User) -> dict[str, str]:
    return get_auth_headers(admin_user)


@pytest_asyncio.fixture
async def manager_headers(manager_user: User) -> dict[str, str]:
    return get_auth_headers(manager_user)


@pytest_asyncio.fixture
async def user_headers(test_user: User) -> dict[str, str]:
    return get_auth_headers(test_user)


# ============ Payloads ============


class Payloads:
    """Valid create payloads (wire format); keyword overrides are merged in."""

    @staticmethod
    def project(**overrides: Any) -> dict[str, Any]:
        return {
            "name": "Boru Hattı A",
            "status": "active",
            "startDate": "2024-01-01",
            "endDate": "2024-06-30",
            "managerId": "manager-1",
            "description": "Rafineri genişletme",
            **overrides,
        }

    @staticmethod
    def work_order(**overrides: Any) -> dict[str, Any]:
        return {
            "number": "WO-001",
            "projectId": "project-1",
            "status": "pending",
            "priority": "high",
            "assignedTo": "personnel-1",
            "startDate": "2024-02-01",
            "dueDate": "2024-02-15",
            **overrides,
        }

    @staticmethod
    def personnel(**overrides: Any) -> dict[str, Any]:
        return {
            "email": "ayse@example.com",
            "password": "secret123",
            "fullName": "Ayşe Yılmaz",
            "department": "Kaynak",
            **overrides,
        }

    @staticmethod
    def shipment(**overrides: Any) -> dict[str, Any]:
        return {
            "number": "SH-001",
            "projectId": "project-1",
            "status": "pending",
            "priority": "medium",
            "destination": "İzmir",
            "scheduledDate": "2024-03-01",
            "carrier": "Aras Kargo",
            "totalWeight": 1250.5,
            **overrides,
        }

    @staticmethod
    def spool(**overrides: Any) -> dict[str, Any]:
        return {
            "name": "Spool-01",
            "projectId": "project-1",
            "status": "pending",
            "quantity": 10,
            "startDate": "2024-01-15",
            **overrides,
        }

    @staticmethod
    def inventory_item(**overrides: Any) -> dict[str, Any]:
        return {
            "name": "Çelik Boru",
            "code": "CB-100",
            "category": "Boru",
            "type": "raw_material",
            "quantity": 40,
            "unit": "adet",
            "minStock": 10,
            "maxStock": 200,
            "location": "Depo 1",
            "supplier": "Borusan",
            "cost": 125.0,
            **overrides,
        }


@pytest.fixture
def payloads() -> Payloads:
    return Payloads()


@pytest.fixture
def auth_headers_for():
    """Build auth headers for a user created inside a test."""
    return get_auth_headers
