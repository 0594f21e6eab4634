"""
OrderRecord entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..enums import OrderStatus, OrderType
from ..value_objects import LineItem, utcnow


@dataclass
class OrderRecord:
    """
    One commerce order mirrored locally.

    `platform_order_id` is the idempotency key: it maps to at most one
    record and never changes once set.
    """
    platform_order_id: str
    order_number: str
    customer_email: str
    status: OrderStatus = OrderStatus.PENDING
    order_type: OrderType = OrderType.ORDER
    total_amount: Decimal = Decimal("0")
    line_items: List[LineItem] = field(default_factory=list)
    customer_name: Optional[str] = None
    shipping_address: Optional[Dict[str, Any]] = None
    raw_platform_snapshot: Dict[str, Any] = field(default_factory=dict)
    last_email_sent_at: Optional[datetime] = None
    last_email_status: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        if not self.platform_order_id:
            raise ValueError("platform_order_id is required")
        if not isinstance(self.total_amount, Decimal):
            self.total_amount = Decimal(str(self.total_amount))
        self.customer_email = (self.customer_email or "").strip().lower()

    def apply(self, other: "OrderRecord") -> bool:
        """Copy mutable platform fields from a freshly mapped record.

        Returns:
            True if any field changed (updated_at is bumped only then)
        """
        before = self._platform_fields()
        self.order_number = other.order_number
        self.customer_email = other.customer_email
        self.customer_name = other.customer_name
        self.status = other.status
        self.order_type = other.order_type
        self.total_amount = other.total_amount
        self.line_items = list(other.line_items)
        self.shipping_address = other.shipping_address
        self.raw_platform_snapshot = dict(other.raw_platform_snapshot)
        changed = before != self._platform_fields()
        if changed:
            self.updated_at = utcnow()
        return changed

    def _platform_fields(self) -> tuple:
        return (
            self.order_number,
            self.customer_email,
            self.customer_name,
            self.status,
            self.order_type,
            self.total_amount,
            tuple(self.line_items),
            self.shipping_address,
            self.raw_platform_snapshot,
        )

    def mark_email_pending(self) -> None:
        self.last_email_status = "pending"
        self.last_email_sent_at = utcnow()
        self.updated_at = self.last_email_sent_at

    @property
    def has_email(self) -> bool:
        return bool(self.customer_email)
