"""Tests for WebhookIngressService routing and payload checks."""
import json

import pytest

from core.application.dtos.sync_dto import CreateMappingRequest
from core.application.services import (
    NotificationTrigger,
    OrderReconciler,
    ProductSyncService,
    WebhookIngressService,
    WebhookVerifier,
)
from core.application.services.webhook_verifier import compute_signature
from core.domain.enums import LocalType, OrderStatus
from core.domain.errors import WebhookPayloadError, WebhookVerificationError
from tests.mocks import make_order_payload


SECRET = "whsec_test"


@pytest.fixture
def product_sync(session_factory, gateway):
    return ProductSyncService(session_factory, gateway)


@pytest.fixture
def ingress(session_factory, mailer, product_sync):
    reconciler = OrderReconciler(session_factory, NotificationTrigger(session_factory, mailer))
    return WebhookIngressService(WebhookVerifier(SECRET), reconciler, product_sync)


def signed(body):
    raw = body if isinstance(body, bytes) else json.dumps(body).encode()
    return raw, compute_signature(SECRET, raw)


@pytest.mark.asyncio
async def test_order_webhook_is_reconciled(ingress):
    raw, signature = signed({"order": make_order_payload()})

    result = await ingress.process("orders/create", "beiza.myshopify.com", raw, signature)

    assert result.status == "processed"
    assert result.order.created is True
    assert result.order.new_status == OrderStatus.CONFIRMED
    assert result.execution_id


@pytest.mark.asyncio
async def test_bad_signature_is_rejected_before_parsing(ingress):
    with pytest.raises(WebhookVerificationError):
        await ingress.process("orders/create", None, b"not json", "bogus")


@pytest.mark.asyncio
async def test_unknown_topic_is_ignored(ingress):
    raw, signature = signed({"customer": {}})

    result = await ingress.process("customers/create", None, raw, signature)

    assert result.status == "ignored"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [b"{not json", b"[1, 2, 3]", b'{"order": "nope"}', b"{}", b'{"order": {"email": "a@b.c"}}'],
)
async def test_malformed_order_payloads(ingress, body):
    raw, signature = signed(body)
    with pytest.raises(WebhookPayloadError):
        await ingress.process("orders/updated", None, raw, signature)


@pytest.mark.asyncio
async def test_product_webhook_refreshes_mapping(ingress, product_sync):
    await product_sync.create_mapping(
        CreateMappingRequest(local_type=LocalType.OFFERING, local_id="o-1", platform_product_id="321")
    )
    raw, signature = signed({"product": {"id": 321, "title": "Updated", "variants": [{"id": 3210}]}})

    result = await ingress.process("products/update", None, raw, signature)

    assert result.detail == "mapping refreshed"


@pytest.mark.asyncio
async def test_inventory_webhook(ingress, product_sync):
    await product_sync.create_mapping(
        CreateMappingRequest(
            local_type=LocalType.PHYSICAL_PRODUCT,
            local_id="p-1",
            platform_product_id="11",
            platform_variant_id="110",
        )
    )
    raw, signature = signed({"inventory_level": {"variant_id": 110, "available": "4"}})

    result = await ingress.process("inventory_levels/update", None, raw, signature)

    assert result.detail == "inventory updated"


@pytest.mark.asyncio
async def test_inventory_webhook_requires_fields(ingress):
    raw, signature = signed({"inventory_level": {"variant_id": 110}})
    with pytest.raises(WebhookPayloadError):
        await ingress.process("inventory_levels/update", None, raw, signature)
