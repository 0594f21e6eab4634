"""Domain layer - pure domain models and interfaces."""

from .entities import DigitalAsset, OrderRecord, ProductMapping, SyncLogEntry
from .errors import (
    CommerceGatewayError,
    CommerceSyncError,
    OrderNotFoundError,
    WebhookPayloadError,
    WebhookVerificationError,
)
from .repositories import (
    DigitalAssetRepository,
    OrderRepository,
    ProductMappingRepository,
    SyncLogRepository,
)
from .value_objects import ExecutionID, LineItem

__all__ = [
    "CommerceGatewayError",
    "CommerceSyncError",
    "DigitalAsset",
    "DigitalAssetRepository",
    "ExecutionID",
    "LineItem",
    "OrderNotFoundError",
    "OrderRecord",
    "OrderRepository",
    "ProductMapping",
    "ProductMappingRepository",
    "SyncLogEntry",
    "SyncLogRepository",
    "WebhookPayloadError",
    "WebhookVerificationError",
]
