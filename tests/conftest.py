"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any
from uuid import uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory, one connection shared by all sessions)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Auth provider signing HS256 tokens with a test secret."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def test_user() -> TokenUser:
    """A signed-in auth user (no profile yet)."""
    return TokenUser(id=uuid4(), email="alex@example.com", display_name="Alex")


@pytest.fixture
def auth_headers(auth_provider: JWTAuthProvider, test_user: TokenUser) -> dict[str, str]:
    """Authorization headers for test_user."""
    return {"Authorization": f"Bearer {auth_provider.create_token(test_user)}"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async client against the real app, no overrides (no auth)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
) -> FastAPI:
    """
    App wired to the in-memory database.

    Services get a UoW factory over the test session factory and tokens are
    validated with the test auth provider, so requests authenticate with
    real bearer tokens.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1 import dependencies as deps
    from domain.services.discovery_service import DiscoveryService
    from domain.services.match_service import MatchService
    from domain.services.message_service import MessageService
    from domain.services.profile_service import ProfileService
    from domain.services.safety_service import SafetyService
    from domain.services.swipe_service import SwipeService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    services: dict[Callable[[], Any], Any] = {
        deps.get_profile_service: ProfileService(test_uow_factory),
        deps.get_discovery_service: DiscoveryService(test_uow_factory),
        deps.get_swipe_service: SwipeService(test_uow_factory),
        deps.get_match_service: MatchService(test_uow_factory),
        deps.get_message_service: MessageService(test_uow_factory),
        deps.get_safety_service: SafetyService(test_uow_factory),
    }
    for dependency, service in services.items():
        app.dependency_overrides[dependency] = lambda service=service: service
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider

    return app


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client for the wired app. Pass per-user headers on each request."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


Member = tuple[str, dict[str, str]]


@pytest.fixture
def make_member(
    api_client: AsyncClient, auth_provider: JWTAuthProvider
) -> Callable[..., Awaitable[Member]]:
    """
    Sign up a user and create their profile through the API.

    Returns (profile_id, auth headers). Keyword arguments are profile fields.
    """

    async def _make(**fields: Any) -> Member:
        user = TokenUser(id=uuid4(), email=f"{uuid4().hex[:8]}@example.com")
        headers = {"Authorization": f"Bearer {auth_provider.create_token(user)}"}
        body = {"display_name": "Member", "age": 30, "account_type": "single", **fields}
        response = await api_client.post("/api/v1/profile", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]["id"], headers

    return _make
