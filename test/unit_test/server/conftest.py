from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from panelhub.core.database.utils import build_stores, create_all, create_engine, create_sessionmaker

# Use in-memory SQLite for testing; test/conftest.py points DATABASE_URL at it
# before the application module builds its global engine.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a test database engine with all tables for each test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the session and store dependencies overridden."""
    from panelhub.core.database import get_session, get_stores
    from panelhub.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    def get_stores_override():
        return build_stores(session_factory=session_factory, playlist_uid_attempts=3)

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_stores] = get_stores_override

    # ASGITransport sends no lifespan events, so init_db never runs against the app engine
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_client(client: AsyncClient) -> AsyncClient:
    """Client with data sources ``prom-main``, ``loki-main`` and read-only ``tempo-prov`` in org 1."""
    for payload in (
        {"uid": "prom-main", "name": "Prometheus", "type": "prometheus"},
        {"uid": "loki-main", "name": "Loki", "type": "loki"},
        {"uid": "tempo-prov", "name": "Tempo", "type": "tempo", "read_only": True},
    ):
        response = await client.post("/api/v1/datasources", json=payload)
        assert response.status_code == 201
    return client
