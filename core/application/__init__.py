"""Application layer - services, interfaces, and DTOs."""

from .dtos import (
    DownloadLink,
    LocalProductEntity,
    ReconcileSummary,
    ReconciliationResult,
    SyncResult,
    WebhookResult,
)
from .interfaces import ICommerceGateway, IOrderMailer, IStorageClient

__all__ = [
    # DTOs
    "DownloadLink",
    "LocalProductEntity",
    "ReconcileSummary",
    "ReconciliationResult",
    "SyncResult",
    "WebhookResult",
    # Interfaces
    "ICommerceGateway",
    "IOrderMailer",
    "IStorageClient",
]
