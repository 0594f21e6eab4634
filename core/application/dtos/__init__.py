"""Application DTOs."""

from .download_dto import DigitalAssetDTO, DownloadLink, IssueDownloadRequest, IssueDownloadResponse
from .order_dto import LineItemDTO, OrderSummaryDTO, ReconciliationResult, UpdateOrderStatusRequest
from .sync_dto import (
    CreateMappingRequest,
    LocalProductEntity,
    ProductMappingDTO,
    ReconcileSummary,
    SyncResult,
)
from .webhook_dto import WebhookResult

__all__ = [
    "CreateMappingRequest",
    "DigitalAssetDTO",
    "DownloadLink",
    "IssueDownloadRequest",
    "IssueDownloadResponse",
    "LineItemDTO",
    "LocalProductEntity",
    "OrderSummaryDTO",
    "ProductMappingDTO",
    "ReconcileSummary",
    "ReconciliationResult",
    "SyncResult",
    "UpdateOrderStatusRequest",
    "WebhookResult",
]
