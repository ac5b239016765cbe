"""
Correlation store.

This module provides the data access operations for correlations. Every
mutating operation resolves the source data source first and runs inside a
single transaction, so a failed validation never leaves a partial write.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from panelhub.core.errors import (
    CorrelationNotFoundError,
    SourceDataSourceDoesNotExistError,
    SourceDataSourceReadOnlyError,
    TargetDataSourceDoesNotExistError,
    UpdateCorrelationEmptyParamsError,
)
from panelhub.core.logging_config import get_logger
from panelhub.core.models.correlations import (
    CreateCorrelationCommand,
    DeleteCorrelationCommand,
    DeleteCorrelationsBySourceUIDCommand,
    DeleteCorrelationsByTargetUIDCommand,
    GetCorrelationQuery,
    GetCorrelationsBySourceUIDQuery,
    UpdateCorrelationCommand,
)
from panelhub.core.uid import generate_short_uid

from ..entities.correlations import Correlation
from ..entities.data_sources import DataSource
from ..utils import db_session, transactional_session
from .data_sources import DataSourceRepository

logger = get_logger(__name__)


class CorrelationStore:
    """Store for correlations between data sources.

    Correlation rows carry data source uids but no org id. Org scoping comes
    only from resolving the source data source within the command's org, so
    orgs that reuse a data source uid see each other's correlations on it.
    The bulk deletes below match on uid alone.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the store.

        Args:
            session_factory: Factory used to open one session per operation
        """
        self.session_factory = session_factory

    @staticmethod
    async def _get_source(
        session: AsyncSession, org_id: int, source_uid: str, check_read_only: bool = True
    ) -> DataSource:
        source = await DataSourceRepository(session).get_by_uid(org_id, source_uid)
        if source is None:
            logger.debug(f"Source data source {source_uid} not found in org {org_id}")
            raise SourceDataSourceDoesNotExistError()
        if check_read_only and source.read_only:
            logger.debug(f"Source data source {source_uid} in org {org_id} is read only")
            raise SourceDataSourceReadOnlyError()
        return source

    async def create_correlation(self, cmd: CreateCorrelationCommand) -> Correlation:
        """Create a correlation after validating both data sources.

        Args:
            cmd: Create command

        Returns:
            The persisted correlation with its generated uid

        Raises:
            SourceDataSourceDoesNotExistError: Source not found in the org
            SourceDataSourceReadOnlyError: Source is read only and the check is not skipped
            TargetDataSourceDoesNotExistError: Target not found in the org
        """
        correlation = Correlation(
            uid=generate_short_uid(),
            source_uid=cmd.source_uid,
            target_uid=cmd.target_uid,
            label=cmd.label,
            description=cmd.description,
        )

        async with transactional_session(self.session_factory) as session:
            await self._get_source(session, cmd.org_id, cmd.source_uid, check_read_only=not cmd.skip_read_only_check)

            target = await DataSourceRepository(session).get_by_uid(cmd.org_id, cmd.target_uid)
            if target is None:
                logger.debug(f"Target data source {cmd.target_uid} not found in org {cmd.org_id}")
                raise TargetDataSourceDoesNotExistError()

            session.add(correlation)

        logger.info(f"Created correlation {correlation.uid} from {cmd.source_uid} to {cmd.target_uid}")
        return correlation

    async def update_correlation(self, cmd: UpdateCorrelationCommand) -> Correlation:
        """Update the label and/or description of a correlation.

        Raises:
            UpdateCorrelationEmptyParamsError: Neither label nor description given
            SourceDataSourceDoesNotExistError: Source not found in the org
            SourceDataSourceReadOnlyError: Source is read only
            CorrelationNotFoundError: No correlation with this uid under the source
        """
        values = {}
        if cmd.label is not None:
            values["label"] = cmd.label
        if cmd.description is not None:
            values["description"] = cmd.description
        if not values:
            raise UpdateCorrelationEmptyParamsError()

        async with transactional_session(self.session_factory) as session:
            await self._get_source(session, cmd.org_id, cmd.source_uid)

            stmt = (
                update(Correlation)
                .where((Correlation.uid == cmd.uid) & (Correlation.source_uid == cmd.source_uid))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise CorrelationNotFoundError()

            correlation = await self._find(session, cmd.uid, cmd.source_uid)
            if correlation is None:
                raise CorrelationNotFoundError()

        logger.info(f"Updated correlation {cmd.uid} of source {cmd.source_uid}: {sorted(values)}")
        return correlation

    async def delete_correlation(self, cmd: DeleteCorrelationCommand) -> None:
        """Delete a single correlation.

        Raises:
            SourceDataSourceDoesNotExistError: Source not found in the org
            SourceDataSourceReadOnlyError: Source is read only
            CorrelationNotFoundError: Nothing was deleted
        """
        async with transactional_session(self.session_factory) as session:
            await self._get_source(session, cmd.org_id, cmd.source_uid)

            stmt = delete(Correlation).where(
                (Correlation.uid == cmd.uid) & (Correlation.source_uid == cmd.source_uid)
            )
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise CorrelationNotFoundError()

        logger.info(f"Deleted correlation {cmd.uid} of source {cmd.source_uid}")

    async def delete_correlations_by_source_uid(self, cmd: DeleteCorrelationsBySourceUIDCommand) -> int:
        """Delete every correlation starting at ``cmd.source_uid``.

        Returns:
            Number of deleted correlations
        """
        async with db_session(self.session_factory) as session:
            result = await session.execute(delete(Correlation).where(Correlation.source_uid == cmd.source_uid))
        logger.info(f"Deleted {result.rowcount} correlations with source {cmd.source_uid}")
        return result.rowcount

    async def delete_correlations_by_target_uid(self, cmd: DeleteCorrelationsByTargetUIDCommand) -> int:
        """Delete every correlation pointing at ``cmd.target_uid``.

        Returns:
            Number of deleted correlations
        """
        async with db_session(self.session_factory) as session:
            result = await session.execute(delete(Correlation).where(Correlation.target_uid == cmd.target_uid))
        logger.info(f"Deleted {result.rowcount} correlations with target {cmd.target_uid}")
        return result.rowcount

    async def get_correlation(self, query: GetCorrelationQuery) -> Correlation:
        """Get one correlation of a source.

        Raises:
            SourceDataSourceDoesNotExistError: Source not found in the org
            CorrelationNotFoundError: No correlation with this uid under the source
        """
        async with self.session_factory() as session:
            await self._get_source(session, query.org_id, query.source_uid, check_read_only=False)
            correlation = await self._find(session, query.uid, query.source_uid)

        if correlation is None:
            raise CorrelationNotFoundError()
        return correlation

    async def get_correlations_by_source_uid(self, query: GetCorrelationsBySourceUIDQuery) -> List[Correlation]:
        """List all correlations of a source ordered by uid.

        Raises:
            SourceDataSourceDoesNotExistError: Source not found in the org
        """
        async with self.session_factory() as session:
            await self._get_source(session, query.org_id, query.source_uid, check_read_only=False)
            stmt = select(Correlation).where(Correlation.source_uid == query.source_uid).order_by(Correlation.uid)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def handle_data_source_deleted(self, uid: str) -> None:
        """Remove correlations that use a deleted data source on either end."""
        await self.delete_correlations_by_source_uid(DeleteCorrelationsBySourceUIDCommand(source_uid=uid))
        await self.delete_correlations_by_target_uid(DeleteCorrelationsByTargetUIDCommand(target_uid=uid))

    @staticmethod
    async def _find(session: AsyncSession, uid: str, source_uid: str) -> Correlation | None:
        stmt = select(Correlation).where((Correlation.uid == uid) & (Correlation.source_uid == source_uid))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
