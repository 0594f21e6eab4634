"""Repository interfaces."""

from .digital_asset_repository import DigitalAssetRepository
from .order_repository import OrderRepository
from .product_mapping_repository import ProductMappingRepository
from .sync_log_repository import SyncLogRepository

__all__ = [
    "DigitalAssetRepository",
    "OrderRepository",
    "ProductMappingRepository",
    "SyncLogRepository",
]
