"""SQLAlchemy ORM model for product mappings."""

import uuid

from sqlalchemy import JSON, Column, DateTime, Index, String, UniqueConstraint

from core.domain.value_objects import utcnow

from .base import Base


class ProductMappingModel(Base):
    """SQLAlchemy ORM model for product_mappings table."""

    __tablename__ = "product_mappings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    local_type = Column(String(32), nullable=False)
    local_id = Column(String(64), nullable=True)

    # Null until the first successful create on the platform
    platform_product_id = Column(String(64), nullable=True, index=True)
    platform_variant_id = Column(String(64), nullable=True, index=True)

    product_type = Column(String(16), nullable=False, default="physical")
    product_category = Column(String(32), nullable=True)
    source_memoir_id = Column(String(64), nullable=True)

    sync_status = Column(String(16), nullable=False, default="pending")
    last_synced_at = Column(DateTime, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_ = Column("metadata", JSON, nullable=False, default=dict)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint("local_type", "local_id", name="uq_product_mappings_local"),
        Index("idx_product_mappings_sync_status", "sync_status"),
    )
