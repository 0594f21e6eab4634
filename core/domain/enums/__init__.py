"""Domain enums."""

from .asset_type import AssetType
from .order_status import OrderStatus, OrderType
from .product_type import (
    DIGITAL_CATEGORIES,
    LocalType,
    ProductCategory,
    ProductType,
    map_product_type,
)
from .sync_status import SyncLogStatus, SyncOperationType, SyncStatus

__all__ = [
    "AssetType",
    "DIGITAL_CATEGORIES",
    "LocalType",
    "OrderStatus",
    "OrderType",
    "ProductCategory",
    "ProductType",
    "SyncLogStatus",
    "SyncOperationType",
    "SyncStatus",
    "map_product_type",
]
