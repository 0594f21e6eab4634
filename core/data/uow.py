"""Unit of Work pattern for atomic transactions."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .repositories import (
    SqlAlchemyDigitalAssetRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductMappingRepository,
    SqlAlchemySyncLogRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Propagate ExecutionID across all operations
    3. Atomic commit/rollback of all repository operations
    4. Lazy initialization of repositories

    Nothing is committed implicitly: callers commit, and leaving the
    context without committing discards pending changes.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None

        # Lazy-loaded repositories
        self._orders: Optional[SqlAlchemyOrderRepository] = None
        self._product_mappings: Optional[SqlAlchemyProductMappingRepository] = None
        self._digital_assets: Optional[SqlAlchemyDigitalAssetRepository] = None
        self._sync_log: Optional[SqlAlchemySyncLogRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        if exc_type is not None:
            await self._session.rollback()
        await self._session.close()
        self._session = None
        self._orders = None
        self._product_mappings = None
        self._digital_assets = None
        self._sync_log = None

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def execution_id(self) -> ExecutionID:
        """Get current execution ID for tracing."""
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        session = self._require_session()
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(session)
        return self._orders

    @property
    def product_mappings(self) -> SqlAlchemyProductMappingRepository:
        session = self._require_session()
        if self._product_mappings is None:
            self._product_mappings = SqlAlchemyProductMappingRepository(session)
        return self._product_mappings

    @property
    def digital_assets(self) -> SqlAlchemyDigitalAssetRepository:
        session = self._require_session()
        if self._digital_assets is None:
            self._digital_assets = SqlAlchemyDigitalAssetRepository(session)
        return self._digital_assets

    @property
    def sync_log(self) -> SqlAlchemySyncLogRepository:
        session = self._require_session()
        if self._sync_log is None:
            self._sync_log = SqlAlchemySyncLogRepository(session)
        return self._sync_log

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self._require_session().commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self._require_session().rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
