"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for workflow execution tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class LineItem:
    """
    Single order line as mirrored from the commerce platform.

    Price is per unit. Always Decimal, never float.
    """
    title: str
    quantity: int
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {self.quantity}")

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "quantity": self.quantity, "price": str(self.price)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            title=data.get("title") or "",
            quantity=int(data.get("quantity") or 0),
            price=Decimal(str(data.get("price") or "0")),
        )
