"""Repository interface for OrderRecord."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import OrderRecord


class OrderRepository(ABC):
    """Abstract repository for order persistence."""

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[OrderRecord]:
        pass

    @abstractmethod
    async def get_by_platform_order_id(self, platform_order_id: str) -> Optional[OrderRecord]:
        """Retrieve order by its commerce platform id.

        Args:
            platform_order_id: Platform order id (idempotency key)

        Returns:
            OrderRecord if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_number_and_email(self, order_number: str, email: str) -> Optional[OrderRecord]:
        """Customer lookup; email is compared lower-cased."""
        pass

    @abstractmethod
    async def insert(self, order: OrderRecord) -> bool:
        """Insert a new order inside a savepoint.

        Args:
            order: Order to insert

        Returns:
            True if inserted, False if another writer already stored
            the same platform_order_id (the savepoint is rolled back)
        """
        pass

    @abstractmethod
    async def update(self, order: OrderRecord) -> None:
        """Persist changes to an existing order."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100) -> List[OrderRecord]:
        pass
