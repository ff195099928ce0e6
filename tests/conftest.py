"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator
from typing import Any

# Point the app at in-memory SQLite before any application module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]) -> Any:
    """Create a UoW factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client against the default application."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Any,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the per-test database.

    This client:
    - Uses a fresh in-memory SQLite database, so no profile exists at start
    - Overrides every service dependency to use a test UoW factory
    - Overrides the raw session dependency used by the health check
    """
    from api.v1.dependencies import (
        get_profile_service,
        get_project_service,
        get_skill_service,
        get_work_service,
    )
    from domain.services.profile_service import ProfileService
    from domain.services.project_service import ProjectService
    from domain.services.skill_service import SkillService
    from domain.services.work_service import WorkService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_profile_service] = lambda: ProfileService(uow_factory)
    app.dependency_overrides[get_project_service] = lambda: ProjectService(uow_factory)
    app.dependency_overrides[get_work_service] = lambda: WorkService(uow_factory)
    app.dependency_overrides[get_skill_service] = lambda: SkillService(uow_factory)
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def profile_client(api_client: AsyncClient) -> AsyncClient:
    """API client with a minimal profile already created."""
    response = await api_client.post(
        "/profile",
        json={"name": "Jo Tester", "email": "jo@example.com"},
    )
    assert response.status_code == 201
    return api_client
