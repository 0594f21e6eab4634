"""
Webhook Ingress.

Verifies inbound commerce webhooks and routes them by topic.
"""
from typing import Any, Dict, Optional
import json
import logging

from core.application.dtos.webhook_dto import WebhookResult
from core.application.services.order_reconciler import OrderReconciler
from core.application.services.product_sync_service import ProductSyncService
from core.application.services.webhook_verifier import WebhookVerifier
from core.domain.errors import WebhookPayloadError
from core.domain.value_objects import ExecutionID
from core.infrastructure.logging import bind_execution


logger = logging.getLogger(__name__)

PRODUCT_TOPICS = ("products/create", "products/update")
ORDER_TOPICS = ("orders/create", "orders/updated")
INVENTORY_TOPICS = ("inventory_levels/update",)

REQUIRED_KEYS = {
    **{topic: "product" for topic in PRODUCT_TOPICS},
    **{topic: "order" for topic in ORDER_TOPICS},
    **{topic: "inventory_level" for topic in INVENTORY_TOPICS},
}


class WebhookIngressService:
    """
    Entry point for platform webhooks.

    Verification runs first, on the raw body, for every topic.
    """

    def __init__(
        self,
        verifier: WebhookVerifier,
        reconciler: OrderReconciler,
        product_sync: ProductSyncService,
    ):
        self._verifier = verifier
        self._reconciler = reconciler
        self._product_sync = product_sync

    async def process(
        self,
        topic: str,
        shop_domain: Optional[str],
        raw_body: bytes,
        signature: Optional[str],
    ) -> WebhookResult:
        """
        Verify, parse and dispatch one webhook.

        Raises:
            WebhookVerificationError: Signature check failed
            WebhookPayloadError: Body is not a JSON object or lacks the topic's key
        """
        execution_id = ExecutionID.generate()
        log = bind_execution(logger, execution_id)

        self._verifier.verify(raw_body, signature)

        key = REQUIRED_KEYS.get(topic)
        if key is None:
            log.info(f"Ignoring unsupported webhook topic {topic!r} from {shop_domain}")
            return WebhookResult(topic=topic or "", status="ignored", execution_id=str(execution_id))

        body = self._parse(raw_body)
        data = body.get(key)
        if not isinstance(data, dict):
            raise WebhookPayloadError(f"Webhook {topic} is missing '{key}'")

        log.info(f"📥 Webhook {topic} from {shop_domain}")

        if topic in ORDER_TOPICS:
            try:
                result = await self._reconciler.reconcile(data)
            except ValueError as e:
                raise WebhookPayloadError(str(e)) from e
            return WebhookResult(
                topic=topic,
                status="processed",
                execution_id=str(execution_id),
                order=result,
            )

        if topic in PRODUCT_TOPICS:
            refreshed = await self._product_sync.pull_from_commerce_platform(data)
            return WebhookResult(
                topic=topic,
                status="processed",
                execution_id=str(execution_id),
                detail="mapping refreshed" if refreshed else "no mapping",
            )

        variant_id = data.get("variant_id")
        available = data.get("available")
        if variant_id is None or available is None:
            raise WebhookPayloadError("inventory_level requires variant_id and available")
        try:
            quantity = int(available)
        except (TypeError, ValueError) as e:
            raise WebhookPayloadError(f"Invalid inventory quantity: {available!r}") from e

        updated = await self._product_sync.handle_inventory_update(variant_id, quantity)
        return WebhookResult(
            topic=topic,
            status="processed",
            execution_id=str(execution_id),
            detail="inventory updated" if updated else "no mapping",
        )

    @staticmethod
    def _parse(raw_body: bytes) -> Dict[str, Any]:
        try:
            body = json.loads(raw_body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise WebhookPayloadError(f"Malformed webhook JSON: {e}") from e
        if not isinstance(body, dict):
            raise WebhookPayloadError("Webhook body must be a JSON object")
        return body
