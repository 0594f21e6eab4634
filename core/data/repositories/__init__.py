"""SQLAlchemy repository implementations."""

from .digital_asset_repository_impl import SqlAlchemyDigitalAssetRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .product_mapping_repository_impl import SqlAlchemyProductMappingRepository
from .sync_log_repository_impl import SqlAlchemySyncLogRepository

__all__ = [
    "SqlAlchemyDigitalAssetRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductMappingRepository",
    "SqlAlchemySyncLogRepository",
]
