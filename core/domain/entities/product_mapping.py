"""
ProductMapping entity.

Links a local entity (offering, memoir, physical product) to a product
on the commerce platform and tracks its sync state.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from ..enums import LocalType, ProductCategory, ProductType, SyncStatus
from ..value_objects import utcnow


@dataclass
class ProductMapping:
    local_type: LocalType
    product_type: ProductType
    local_id: Optional[str] = None
    platform_product_id: Optional[str] = None
    platform_variant_id: Optional[str] = None
    product_category: Optional[ProductCategory] = None
    source_memoir_id: Optional[str] = None
    sync_status: SyncStatus = SyncStatus.PENDING
    last_synced_at: Optional[datetime] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def mark_syncing(self) -> None:
        self.sync_status = SyncStatus.SYNCING
        self.updated_at = utcnow()

    def mark_synced(
        self,
        platform_product_id: Optional[str] = None,
        platform_variant_id: Optional[str] = None,
    ) -> None:
        """Record a successful sync and clear any previous error."""
        if platform_product_id:
            self.platform_product_id = platform_product_id
        if platform_variant_id:
            self.platform_variant_id = platform_variant_id
        self.sync_status = SyncStatus.SYNCED
        self.last_synced_at = utcnow()
        self.updated_at = self.last_synced_at
        metadata = dict(self.metadata)
        for key in ("last_error", "error_at", "error_retryable"):
            metadata.pop(key, None)
        self.metadata = metadata

    def mark_error(self, message: str, retryable: bool = False) -> None:
        now = utcnow()
        self.sync_status = SyncStatus.ERROR
        self.updated_at = now
        self.metadata = {
            **self.metadata,
            "last_error": message,
            "error_at": now.isoformat(),
            "error_retryable": retryable,
        }

    def merge_metadata(self, **values: Any) -> None:
        self.metadata = {**self.metadata, **values}
        self.updated_at = utcnow()

    @property
    def last_error(self) -> Optional[str]:
        return self.metadata.get("last_error")
