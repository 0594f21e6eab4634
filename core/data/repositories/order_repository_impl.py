"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import OrderRecord
from core.domain.repositories import OrderRepository

from ..mappers import OrderMapper
from ..models import OrderModel

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def get_by_id(self, order_id: str) -> Optional[OrderRecord]:
        model = await self._session.get(OrderModel, order_id)
        return OrderMapper.to_domain(model) if model else None

    async def get_by_platform_order_id(self, platform_order_id: str) -> Optional[OrderRecord]:
        result = await self._session.execute(
            select(OrderModel).where(OrderModel.platform_order_id == platform_order_id)
        )
        model = result.scalar_one_or_none()
        return OrderMapper.to_domain(model) if model else None

    async def get_by_number_and_email(self, order_number: str, email: str) -> Optional[OrderRecord]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.order_number == order_number)
            .where(OrderModel.customer_email == email.strip().lower())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        return OrderMapper.to_domain(model) if model else None

    async def insert(self, order: OrderRecord) -> bool:
        """Insert inside a savepoint so a UNIQUE violation leaves the outer
        transaction usable.

        Args:
            order: New order record

        Returns:
            False if platform_order_id was already taken
        """
        model = OrderMapper.to_persistence(order)
        try:
            async with self._session.begin_nested():
                self._session.add(model)
                await self._session.flush()
        except IntegrityError:
            logger.info(
                f"Order {order.platform_order_id} inserted concurrently, falling back to update"
            )
            return False
        return True

    async def update(self, order: OrderRecord) -> None:
        model = await self._session.get(OrderModel, order.id)
        if model is None:
            raise LookupError(f"Order {order.id} is not persisted")
        OrderMapper.update_persistence(order, model)
        await self._session.flush()

    async def find_all(self, limit: int = 100) -> List[OrderRecord]:
        result = await self._session.execute(
            select(OrderModel).order_by(OrderModel.created_at.desc()).limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]
