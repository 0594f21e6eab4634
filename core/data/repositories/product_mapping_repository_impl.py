"""SQLAlchemy implementation of ProductMappingRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import ProductMapping
from core.domain.enums import LocalType
from core.domain.repositories import ProductMappingRepository

from ..mappers import ProductMappingMapper
from ..models import ProductMappingModel


class SqlAlchemyProductMappingRepository(ProductMappingRepository):

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _first(self, stmt) -> Optional[ProductMapping]:
        result = await self._session.execute(stmt.limit(1))
        model = result.scalars().first()
        return ProductMappingMapper.to_domain(model) if model else None

    async def get_by_id(self, mapping_id: str) -> Optional[ProductMapping]:
        model = await self._session.get(ProductMappingModel, mapping_id)
        return ProductMappingMapper.to_domain(model) if model else None

    async def get_by_local(self, local_type: LocalType, local_id: Optional[str]) -> Optional[ProductMapping]:
        if local_id is None:
            return None
        return await self._first(
            select(ProductMappingModel)
            .where(ProductMappingModel.local_type == LocalType(local_type).value)
            .where(ProductMappingModel.local_id == local_id)
        )

    async def get_by_platform_product_id(self, platform_product_id: str) -> Optional[ProductMapping]:
        return await self._first(
            select(ProductMappingModel).where(
                ProductMappingModel.platform_product_id == str(platform_product_id)
            )
        )

    async def get_by_variant_id(self, platform_variant_id: str) -> Optional[ProductMapping]:
        return await self._first(
            select(ProductMappingModel).where(
                ProductMappingModel.platform_variant_id == str(platform_variant_id)
            )
        )

    async def list_all(self) -> List[ProductMapping]:
        result = await self._session.execute(
            select(ProductMappingModel).order_by(ProductMappingModel.created_at, ProductMappingModel.id)
        )
        return [ProductMappingMapper.to_domain(model) for model in result.scalars().all()]

    async def add(self, mapping: ProductMapping) -> None:
        self._session.add(ProductMappingMapper.to_persistence(mapping))
        await self._session.flush()

    async def update(self, mapping: ProductMapping) -> None:
        model = await self._session.get(ProductMappingModel, mapping.id)
        if model is None:
            raise LookupError(f"Product mapping {mapping.id} is not persisted")
        ProductMappingMapper.update_persistence(mapping, model)
        await self._session.flush()
