"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus


class ICommerceGateway(ABC):
    """
    Interface for the commerce platform REST API.

    Implementations raise a CommerceSyncError subclass carrying
    `is_retryable` when the platform rejects a call.
    """

    @abstractmethod
    async def get_product(self, product_id: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def list_products(
        self,
        limit: int = 50,
        page: Optional[int] = None,
        product_type: Optional[str] = None,
        tags: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    async def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a product on the platform.

        Args:
            product: Product payload (title, body_html, product_type, variants, ...)

        Returns:
            Created product as returned by the platform (includes `id`)
        """
        pass

    @abstractmethod
    async def update_product(self, product_id: str, product: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        pass

    @abstractmethod
    async def update_variant(self, variant_id: str, variant: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def get_order(self, order_id: str) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def list_orders(
        self,
        limit: int = 50,
        status: Optional[str] = None,
        financial_status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        pass


class IStorageClient(ABC):
    """Interface for the object storage that hosts digital goods."""

    @abstractmethod
    async def create_signed_url(self, bucket: str, path: str, ttl_seconds: int) -> str:
        """
        Create a short-lived signed download URL.

        Args:
            bucket: Storage bucket name
            path: Object path inside the bucket
            ttl_seconds: URL lifetime

        Returns:
            Absolute signed URL
        """
        pass


class IOrderMailer(ABC):
    """
    Interface for customer order emails.

    Template rendering and transport live behind this interface; callers
    only decide when an email is due.
    """

    @abstractmethod
    async def send_status_update(
        self,
        order: OrderRecord,
        previous_status: Optional[OrderStatus],
    ) -> None:
        """
        Send the status-update email for an order.

        Args:
            order: Order in its new state
            previous_status: Status before the transition (None if unknown)
        """
        pass


__all__ = ["ICommerceGateway", "IOrderMailer", "IStorageClient"]
