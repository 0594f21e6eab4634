"""Commerce platform webhook endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from core.application.dtos.webhook_dto import WebhookResult
from core.application.services import WebhookIngressService

from apps.api.deps import get_webhook_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/shopify", response_model=WebhookResult)
async def receive_shopify_webhook(
    request: Request,
    x_shopify_topic: str = Header(default="", alias="X-Shopify-Topic"),
    x_shopify_shop_domain: Optional[str] = Header(default=None, alias="X-Shopify-Shop-Domain"),
    x_shopify_hmac_sha256: Optional[str] = Header(default=None, alias="X-Shopify-Hmac-SHA256"),
    service: WebhookIngressService = Depends(get_webhook_service),
) -> WebhookResult:
    """Receive one Shopify webhook.

    The signature is checked against the raw body before parsing.
    401 on verification failure, 400 on a bad payload, 500 otherwise so
    the platform redelivers.
    """
    raw_body = await request.body()
    return await service.process(
        topic=x_shopify_topic,
        shop_domain=x_shopify_shop_domain,
        raw_body=raw_body,
        signature=x_shopify_hmac_sha256,
    )
