"""SQLAlchemy implementation of SyncLogRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import SyncLogEntry
from core.domain.repositories import SyncLogRepository

from ..mappers import SyncLogMapper
from ..models import SyncLogModel


class SqlAlchemySyncLogRepository(SyncLogRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(self, entry: SyncLogEntry) -> None:
        self._session.add(SyncLogMapper.to_persistence(entry))
        await self._session.flush()

    async def list_recent(self, limit: int = 100, entity_id: Optional[str] = None) -> List[SyncLogEntry]:
        stmt = select(SyncLogModel)
        if entity_id is not None:
            stmt = stmt.where(SyncLogModel.entity_id == entity_id)
        result = await self._session.execute(
            stmt.order_by(SyncLogModel.created_at.desc()).limit(limit)
        )
        return [SyncLogMapper.to_domain(model) for model in result.scalars().all()]
