"""SQLAlchemy ORM model for downloadable digital assets."""

import uuid

from sqlalchemy import Column, DateTime, Integer, String, Text

from core.domain.value_objects import utcnow

from .base import Base


class DigitalAssetModel(Base):
    """SQLAlchemy ORM model for digital_assets table."""

    __tablename__ = "digital_assets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    order_id = Column(String(36), nullable=False, index=True)
    platform_product_id = Column(String(64), nullable=False)
    asset_type = Column(String(32), nullable=False)
    file_url = Column(Text, nullable=False)

    download_token = Column(String(128), unique=True, nullable=False)
    download_count = Column(Integer, nullable=False, default=0)
    expires_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
