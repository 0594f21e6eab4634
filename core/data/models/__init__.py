"""Database models."""

from .base import Base
from .digital_asset_model import DigitalAssetModel
from .order_model import OrderModel
from .product_mapping_model import ProductMappingModel
from .sync_log_model import SyncLogModel

__all__ = [
    "Base",
    "DigitalAssetModel",
    "OrderModel",
    "ProductMappingModel",
    "SyncLogModel",
]
