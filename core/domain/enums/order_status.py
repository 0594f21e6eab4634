"""
Order Status Enums.

Local order lifecycle and the derivation rule that maps the commerce
platform's financial/fulfillment pair onto it.
"""
from enum import Enum
from typing import Iterable, Optional, Union


class OrderStatus(str, Enum):
    """Canonical local order status."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    @property
    def is_terminal(self) -> bool:
        """Cancelled and refunded orders never move forward again."""
        return self in (OrderStatus.CANCELLED, OrderStatus.REFUNDED)

    @classmethod
    def derive(
        cls,
        financial_status: Optional[str],
        fulfillment_status: Optional[str],
    ) -> "OrderStatus":
        """
        Derive local status from platform-reported fields.

        Rules are evaluated in order, first match wins:
        refunded > voided > fulfilled > partial > paid > pending.

        Args:
            financial_status: Platform financial status (e.g. "paid")
            fulfillment_status: Platform fulfillment status (e.g. "fulfilled", None)

        Returns:
            Derived OrderStatus
        """
        if financial_status == "refunded":
            return cls.REFUNDED
        if financial_status == "voided":
            return cls.CANCELLED
        if fulfillment_status == "fulfilled":
            return cls.SHIPPED
        if fulfillment_status == "partial":
            return cls.PROCESSING
        if financial_status == "paid":
            return cls.CONFIRMED
        return cls.PENDING


class OrderType(str, Enum):
    """Regular order or pre-order."""

    ORDER = "order"
    PRE_ORDER = "pre_order"

    @classmethod
    def from_tags(cls, tags: Union[str, Iterable[str], None]) -> "OrderType":
        """Pre-order when the platform tags contain "pre-order"."""
        if not tags:
            return cls.ORDER
        if isinstance(tags, str):
            tags = tags.split(",")
        normalized = {tag.strip().lower() for tag in tags}
        return cls.PRE_ORDER if "pre-order" in normalized else cls.ORDER
