"""DTOs for product mapping sync operations."""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.domain.entities import ProductMapping
from core.domain.enums import LocalType, ProductCategory, ProductType, SyncStatus


# =============================================================================
# REQUEST DTOs
# =============================================================================

class LocalProductEntity(BaseModel):
    """A local entity (offering, memoir, physical product) to publish."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "local_type": "offering",
                "local_id": "3f0c9a52-1d7e-4bb8-9e15-2a60b1c1d7aa",
                "title": "Oak Memorial Casket",
                "description": "<p>Hand-finished oak.</p>",
                "price": "1499.00",
                "product_category": "coffin",
                "tags": ["offering"],
            }
        },
    )

    local_type: LocalType
    local_id: Optional[str] = Field(default=None, description="Local entity id")
    mapping_id: Optional[str] = Field(
        default=None,
        description="Existing mapping to re-push; required to update a standalone product",
    )
    title: str = Field(..., min_length=1)
    description: str = Field(default="", description="Product body HTML")
    price: Optional[Decimal] = Field(default=None, ge=0)
    sku: Optional[str] = None
    product_category: Optional[ProductCategory] = None
    source_memoir_id: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    inventory_quantity: Optional[int] = Field(default=None, ge=0)
    status: str = Field(default="active", description="Platform product status")


class CreateMappingRequest(BaseModel):
    """Direct registration of an already-published product."""

    model_config = ConfigDict(frozen=True)

    local_type: LocalType
    local_id: Optional[str] = None
    platform_product_id: str = Field(..., min_length=1)
    platform_variant_id: Optional[str] = None
    product_category: Optional[ProductCategory] = None
    source_memoir_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# RESPONSE DTOs
# =============================================================================

class SyncResult(BaseModel):
    """Outcome of a single push."""

    model_config = ConfigDict(frozen=True)

    success: bool
    mapping_id: str
    platform_product_id: Optional[str] = None
    error: Optional[str] = None


class ReconcileSummary(BaseModel):
    """Outcome of a batch reconciliation run."""

    model_config = ConfigDict(frozen=True)

    synced: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.synced + self.errors


class ProductMappingDTO(BaseModel):
    """Response DTO for product mapping details."""

    model_config = ConfigDict(frozen=True)

    id: str
    local_type: LocalType
    local_id: Optional[str] = None
    platform_product_id: Optional[str] = None
    platform_variant_id: Optional[str] = None
    product_type: ProductType
    product_category: Optional[ProductCategory] = None
    source_memoir_id: Optional[str] = None
    sync_status: SyncStatus
    last_synced_at: Optional[datetime] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_entity(cls, mapping: ProductMapping) -> "ProductMappingDTO":
        return cls(
            id=mapping.id,
            local_type=mapping.local_type,
            local_id=mapping.local_id,
            platform_product_id=mapping.platform_product_id,
            platform_variant_id=mapping.platform_variant_id,
            product_type=mapping.product_type,
            product_category=mapping.product_category,
            source_memoir_id=mapping.source_memoir_id,
            sync_status=mapping.sync_status,
            last_synced_at=mapping.last_synced_at,
            metadata=mapping.metadata,
        )
