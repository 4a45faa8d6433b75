"""Shared pytest fixtures: in-memory stores for services and the API, SQLite for SQL repositories."""

import logging
import os

# cheap bcrypt and no database at import time; must run before notekeeper is imported
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notekeeper.config import Settings, get_settings
from notekeeper.core.models.base import BaseModel
from notekeeper.core.repositories import InMemoryStorage
from notekeeper.core.schemas.auth import LoginRequest, RegisterRequest
from notekeeper.core.services import AuthService
from notekeeper.core.storage import build_memory_stores, build_sql_stores
from notekeeper.dependencies import get_stores
from notekeeper.main import app
from notekeeper.security import TokenService

# Silence verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "Password123!"


@pytest.fixture
def test_settings():
    """Settings for tests: memory stores, store-backed ledger, fast hashing."""
    return Settings(
        storage_backend="memory",
        token_ledger_backend="store",
        database_url="sqlite+aiosqlite:///:memory:",
        access_token_secret_key="test-access-secret",
        refresh_token_secret_key="test-refresh-secret",
        password_hash_rounds=4,
        debug=True,
    )


@pytest.fixture
def token_service(test_settings):
    return TokenService(test_settings)


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def stores(memory_storage):
    return build_memory_stores(memory_storage)


@pytest.fixture
def auth_service(stores, token_service):
    return AuthService(stores, token_service)


@pytest.fixture
def register_user(auth_service):
    """Factory: register a user through the service and return the UserResponse."""

    async def _register(username: str, full_name: str = None):
        return await auth_service.register_user(
            RegisterRequest(
                username=username,
                password=TEST_PASSWORD,
                full_name=full_name or username.title(),
            )
        )

    return _register


@pytest.fixture
def login_user(auth_service):
    async def _login(username: str, password: str = TEST_PASSWORD):
        return await auth_service.login(LoginRequest(username=username, password=password))

    return _login


@pytest.fixture
def test_app(memory_storage, test_settings):
    """App wired to a fresh in-memory storage per test."""

    async def _override_get_stores():
        yield build_memory_stores(memory_storage)

    app.dependency_overrides[get_stores] = _override_get_stores
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api_user(async_client):
    """Factory: register and log in over HTTP, returning (user, auth headers, tokens)."""

    async def _create(username: str):
        resp = await async_client.post(
            "/api/auth/register",
            json={"username": username, "password": TEST_PASSWORD, "full_name": username.title()},
        )
        assert resp.status_code == 201, resp.text
        resp = await async_client.post(
            "/api/auth/login", json={"username": username, "password": TEST_PASSWORD}
        )
        assert resp.status_code == 200, resp.text
        tokens = resp.json()
        headers = {"Authorization": f"Bearer {tokens['access_token']}"}
        return tokens["user"], headers, tokens

    return _create


@pytest.fixture
async def sql_engine():
    """SQLite in-memory engine with foreign keys enforced, fresh schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def sql_session(sql_engine):
    session_factory = async_sessionmaker(sql_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_stores(sql_session):
    return build_sql_stores(sql_session)
