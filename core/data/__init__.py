"""Data layer - infrastructure persistence and mapping."""

from .mappers import DigitalAssetMapper, OrderMapper, ProductMappingMapper, SyncLogMapper
from .models import Base, DigitalAssetModel, OrderModel, ProductMappingModel, SyncLogModel
from .repositories import (
    SqlAlchemyDigitalAssetRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductMappingRepository,
    SqlAlchemySyncLogRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "DigitalAssetMapper",
    "DigitalAssetModel",
    "OrderMapper",
    "OrderModel",
    "ProductMappingMapper",
    "ProductMappingModel",
    "SqlAlchemyDigitalAssetRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductMappingRepository",
    "SqlAlchemySyncLogRepository",
    "SyncLogMapper",
    "SyncLogModel",
    "UnitOfWork",
]
