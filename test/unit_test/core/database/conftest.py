"""Test configuration for database unit tests.

This module provides common fixtures for testing the centralized database
layer with in-memory SQLite: an engine with all tables created, a session
factory shared by the stores, and a set of seeded data sources.
"""

from __future__ import annotations

from typing import AsyncGenerator, Dict

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from panelhub.core.database.entities.data_sources import DataSource
from panelhub.core.database.repositories.correlations import CorrelationStore
from panelhub.core.database.repositories.data_sources import DataSourceRepository
from panelhub.core.database.repositories.playlists import PlaylistStore
from panelhub.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with all tables."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(in_memory_engine)


@pytest.fixture(scope="function")
async def in_memory_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def sample_data_source_data() -> dict:
    """Sample data source data for testing."""
    return {
        "org_id": 1,
        "uid": "prom-main",
        "name": "Prometheus",
        "type": "prometheus",
        "url": "http://prometheus:9090",
        "read_only": False,
    }


@pytest.fixture(scope="function")
async def data_sources(session_factory) -> Dict[str, DataSource]:
    """Seed data sources used by the correlation tests.

    - ``source``/``target``: writable data sources in org 1
    - ``provisioned``: read-only data source in org 1
    - ``other_org``: data source in org 2
    """
    specs = {
        "source": DataSource(org_id=1, uid="prom-main", name="Prometheus", type="prometheus"),
        "target": DataSource(org_id=1, uid="loki-main", name="Loki", type="loki"),
        "provisioned": DataSource(org_id=1, uid="tempo-prov", name="Tempo", type="tempo", read_only=True),
        "other_org": DataSource(org_id=2, uid="prom-other", name="Prometheus", type="prometheus"),
    }
    async with session_factory() as session:
        repo = DataSourceRepository(session)
        for data_source in specs.values():
            await repo.create(data_source)
        await session.commit()
    return specs


@pytest.fixture(scope="function")
def correlation_store(session_factory) -> CorrelationStore:
    return CorrelationStore(session_factory)


@pytest.fixture(scope="function")
def playlist_store(session_factory) -> PlaylistStore:
    return PlaylistStore(session_factory)
