"""SQLAlchemy implementation of DigitalAssetRepository."""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import DigitalAsset
from core.domain.repositories import DigitalAssetRepository
from core.domain.value_objects import utcnow

from ..mappers import DigitalAssetMapper
from ..models import DigitalAssetModel


class SqlAlchemyDigitalAssetRepository(DigitalAssetRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, asset: DigitalAsset) -> None:
        self._session.add(DigitalAssetMapper.to_persistence(asset))
        await self._session.flush()

    async def get_by_token(self, token: str) -> Optional[DigitalAsset]:
        result = await self._session.execute(
            select(DigitalAssetModel).where(DigitalAssetModel.download_token == token)
        )
        model = result.scalar_one_or_none()
        return DigitalAssetMapper.to_domain(model) if model else None

    async def list_by_order(self, order_id: str) -> List[DigitalAsset]:
        result = await self._session.execute(
            select(DigitalAssetModel)
            .where(DigitalAssetModel.order_id == order_id)
            .order_by(DigitalAssetModel.created_at.desc())
        )
        return [DigitalAssetMapper.to_domain(model) for model in result.scalars().all()]

    async def increment_download_count(self, token: str) -> int:
        # Evaluated by the database, never read-modify-write in Python
        result = await self._session.execute(
            update(DigitalAssetModel)
            .where(DigitalAssetModel.download_token == token)
            .values(
                download_count=DigitalAssetModel.download_count + 1,
                updated_at=utcnow(),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
