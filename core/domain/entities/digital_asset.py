"""DigitalAsset entity - a downloadable artifact bound to one order."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..enums import AssetType
from ..value_objects import utcnow


@dataclass
class DigitalAsset:
    order_id: str
    platform_product_id: str
    asset_type: AssetType
    file_url: str
    download_token: str
    download_count: int = 0
    expires_at: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """An asset without expiry never expires."""
        if self.expires_at is None:
            return False
        return self.expires_at < (now or utcnow())
