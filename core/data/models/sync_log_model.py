"""SQLAlchemy ORM model for the sync audit log."""

import uuid

from sqlalchemy import Column, DateTime, Index, String, Text

from core.domain.value_objects import utcnow

from .base import Base


class SyncLogModel(Base):
    """SQLAlchemy ORM model for sync_log table (append-only)."""

    __tablename__ = "sync_log"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    operation_type = Column(String(16), nullable=False)
    entity_type = Column(String(64), nullable=False)
    entity_id = Column(String(64), nullable=True)
    status = Column(String(16), nullable=False)
    error_message = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_sync_log_entity", "entity_type", "entity_id"),
        Index("idx_sync_log_created", "created_at"),
    )
