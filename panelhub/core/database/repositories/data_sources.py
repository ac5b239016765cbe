"""
Data source repository.

Session-bound data access for data sources. The correlation store uses it
inside its own transaction to resolve the source and target of a correlation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from panelhub.core.logging_config import get_logger

from ..entities.data_sources import DataSource
from .base import AsyncBaseRepository, QueryBuilder

logger = get_logger(__name__)


class DataSourceRepository(AsyncBaseRepository[DataSource]):
    """Repository for data source data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, DataSource)

    async def create(self, data_source: DataSource) -> DataSource:
        """Insert a data source and flush so its id is populated."""
        self.session.add(data_source)
        await self.session.flush()
        await self.session.refresh(data_source)
        logger.info(f"Created data source {data_source.uid} in org {data_source.org_id}")
        return data_source

    async def get_by_uid(self, org_id: int, uid: str) -> Optional[DataSource]:
        """Get a data source by its uid within an org.

        Args:
            org_id: Organisation the data source belongs to
            uid: Public data source identifier

        Returns:
            DataSource instance or None
        """
        stmt = select(DataSource).where((DataSource.org_id == org_id) & (DataSource.uid == uid))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, org_id: int, name: str) -> Optional[DataSource]:
        stmt = select(DataSource).where((DataSource.org_id == org_id) & (DataSource.name == name))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_uid(self, org_id: int, uid: str) -> bool:
        """Delete a data source by uid within an org.

        Returns:
            True if a row was removed, False if nothing matched
        """
        stmt = sa_delete(DataSource).where((DataSource.org_id == org_id) & (DataSource.uid == uid))
        result = await self.session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted data source {uid} in org {org_id}")
        return deleted

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[DataSource]:
        """List data sources ordered by name.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (org_id, type, read_only)

        Returns:
            List of DataSource instances
        """
        stmt = select(DataSource).order_by(DataSource.name)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, DataSource, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
