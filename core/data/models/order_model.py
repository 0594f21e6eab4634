"""SQLAlchemy ORM model for mirrored commerce orders."""

import uuid

from sqlalchemy import JSON, Column, DateTime, Index, Numeric, String

from core.domain.value_objects import utcnow

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Idempotency key for webhook replay
    platform_order_id = Column(String(64), unique=True, nullable=False)
    order_number = Column(String(64), nullable=False)

    customer_email = Column(String(255), nullable=False, default="")
    customer_name = Column(String(255), nullable=True)
    status = Column(String(32), nullable=False, default="pending")
    order_type = Column(String(32), nullable=False, default="order")
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)

    line_items = Column(JSON, nullable=False, default=list)
    shipping_address = Column(JSON, nullable=True)
    raw_platform_snapshot = Column(JSON, nullable=False, default=dict)

    last_email_sent_at = Column(DateTime, nullable=True)
    last_email_status = Column(String(32), nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("idx_orders_number_email", "order_number", "customer_email"),
    )
