"""Application services."""
from .digital_asset_service import DigitalAssetService
from .notification_trigger import NotificationTrigger
from .order_reconciler import OrderReconciler
from .product_sync_service import ProductSyncService
from .webhook_service import WebhookIngressService
from .webhook_verifier import WebhookVerifier

__all__ = [
    "DigitalAssetService",
    "NotificationTrigger",
    "OrderReconciler",
    "ProductSyncService",
    "WebhookIngressService",
    "WebhookVerifier",
]
