"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus, OrderType


class ReconciliationResult(BaseModel):
    """Outcome of mirroring one platform order locally."""

    order_id: str = Field(..., description="Local order id")
    previous_status: Optional[OrderStatus] = Field(None, description="Stored status before this event")
    new_status: OrderStatus = Field(..., description="Derived status after this event")
    created: bool = Field(default=False, description="True if the record was inserted")
    status_changed: bool = Field(default=False, description="True for an existing record whose status moved")

    model_config = {"frozen": True}


class LineItemDTO(BaseModel):
    """DTO for order line item."""

    title: str
    quantity: int = Field(..., ge=0)
    price: Decimal = Field(..., ge=0, description="Unit price")

    model_config = {"frozen": True}


class OrderSummaryDTO(BaseModel):
    """Response DTO for customer-facing order lookup."""

    id: str
    order_number: str
    customer_name: Optional[str] = None
    status: OrderStatus
    order_type: OrderType
    total_amount: Decimal
    currency: Optional[str] = None
    line_items: List[LineItemDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: OrderRecord) -> "OrderSummaryDTO":
        return cls(
            id=order.id,
            order_number=order.order_number,
            customer_name=order.customer_name,
            status=order.status,
            order_type=order.order_type,
            total_amount=order.total_amount,
            currency=order.raw_platform_snapshot.get("currency"),
            line_items=[
                LineItemDTO(title=item.title, quantity=item.quantity, price=item.price)
                for item in order.line_items
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for a manual status change."""

    status: OrderStatus
    send_email: bool = Field(default=True, description="Notify the customer")

    model_config = {"frozen": True}
