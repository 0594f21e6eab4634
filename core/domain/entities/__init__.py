"""Domain entities."""

from .digital_asset import DigitalAsset
from .order import OrderRecord
from .product_mapping import ProductMapping
from .sync_log import SyncLogEntry

__all__ = [
    "DigitalAsset",
    "OrderRecord",
    "ProductMapping",
    "SyncLogEntry",
]
