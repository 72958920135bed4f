"""
Covid Portal Backend - Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every HTTP test runs against create_app() bound to a throwaway SQLite
       file that the fixtures provision and seed (the application itself never
       creates tables).

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   Settings with a test-only signing secret
    ├── engine:          Async engine over a seeded temp database
    ├── test_client:     HTTPX AsyncClient wired to the app
    ├── auth_headers:    Authorization header carrying a valid token for alice
    ├── broken_client:   Client whose database has no tables (storage failures)
    └── mock_db_session: AsyncMock session for service-level tests

Seed Data:
    user:     alice / alice@123
    state:    1 Andaman and Nicobar Islands, 2 Andhra Pradesh, 3 Arunachal Pradesh
    district: 1 Nicobars (state 1), 2 North and Middle Andaman (state 1),
              3 Anantapur (state 2); state 3 has no districts
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from covid_portal.auth.security import hash_password, issue_token
from covid_portal.config import Settings
from covid_portal.database import Base, build_engine
from covid_portal.models import District, State, User


TEST_SECRET = "test-secret-not-for-production"

ALICE_PASSWORD = "alice@123"

# bcrypt is slow on purpose; hash once per test session
ALICE_HASH = hash_password(ALICE_PASSWORD)

SEED_STATES = [
    {"state_id": 1, "state_name": "Andaman and Nicobar Islands", "population": 380581},
    {"state_id": 2, "state_name": "Andhra Pradesh", "population": 49386799},
    {"state_id": 3, "state_name": "Arunachal Pradesh", "population": 1383727},
]

SEED_DISTRICTS = [
    {"district_id": 1, "district_name": "Nicobars", "state_id": 1,
     "cases": 100, "cured": 80, "active": 15, "deaths": 5},
    {"district_id": 2, "district_name": "North and Middle Andaman", "state_id": 1,
     "cases": 60, "cured": 50, "active": 8, "deaths": 2},
    {"district_id": 3, "district_name": "Anantapur", "state_id": 2,
     "cases": 500, "cured": 400, "active": 90, "deaths": 10},
]


def _sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a temp database, with a test-only signing secret."""
    return Settings(
        database_url=_sqlite_url(tmp_path / "portal.db"),
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def engine(test_settings) -> AsyncGenerator[AsyncEngine, None]:
    """
    Async engine over a freshly provisioned and seeded SQLite file.

    Disposed after the test so the temp file is released.
    """
    db_engine = build_engine(test_settings.database_url)
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(User), [{"username": "alice", "password": ALICE_HASH}])
        await conn.execute(insert(State), SEED_STATES)
        await conn.execute(insert(District), SEED_DISTRICTS)
    yield db_engine
    await db_engine.dispose()


@pytest_asyncio.fixture
async def test_client(test_settings, engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_states(test_client, auth_headers):
            response = await test_client.get("/states/", headers=auth_headers)
            assert response.status_code == 200
    """
    from covid_portal.main import create_app

    app = create_app(settings=test_settings, engine=engine)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(tmp_path) -> AsyncGenerator[AsyncClient, None]:
    """
    Client whose database file exists but holds no tables.

    Every query fails inside the driver, which exercises the 500 path of
    each handler end to end.
    """
    from covid_portal.main import create_app

    cfg = Settings(
        database_url=_sqlite_url(tmp_path / "empty.db"),
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )
    db_engine = build_engine(cfg.database_url)
    app = create_app(settings=cfg, engine=db_engine)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await db_engine.dispose()


@pytest.fixture
def auth_headers():
    """Authorization header with a valid token for the seeded user."""
    token = issue_token(secret=TEST_SECRET, username="alice")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_state(mock_db_session):
            result = MagicMock()
            result.scalar_one_or_none.return_value = None
            mock_db_session.execute.return_value = result
            with pytest.raises(NotFoundError):
                await state_service.get_state(mock_db_session, 99)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session
