"""Unit tests for domain entities."""
from datetime import timedelta
from decimal import Decimal

from core.domain.entities import DigitalAsset, OrderRecord, ProductMapping
from core.domain.enums import (
    AssetType,
    LocalType,
    OrderStatus,
    ProductCategory,
    ProductType,
    SyncStatus,
    map_product_type,
)
from core.domain.value_objects import LineItem, utcnow


def test_map_product_type():
    assert map_product_type(ProductCategory.TRIBUTE) == ProductType.DIGITAL
    assert map_product_type("archive") == ProductType.DIGITAL
    assert map_product_type(ProductCategory.MEMORY_PAGE) == ProductType.DIGITAL
    assert map_product_type(ProductCategory.COFFIN) == ProductType.PHYSICAL
    assert map_product_type("photo_book") == ProductType.PHYSICAL
    assert map_product_type(None) == ProductType.PHYSICAL
    assert map_product_type("unknown") == ProductType.PHYSICAL


def test_order_email_is_lower_cased():
    order = OrderRecord(platform_order_id="1", order_number="1001", customer_email=" Jane@Example.COM ")
    assert order.customer_email == "jane@example.com"


def test_apply_reports_change_only_when_fields_differ():
    line = LineItem(title="Book", quantity=1, price=Decimal("10.00"))
    stored = OrderRecord(
        platform_order_id="1",
        order_number="1001",
        customer_email="a@b.c",
        total_amount=Decimal("10.00"),
        line_items=[line],
    )
    before = stored.updated_at
    same = OrderRecord(
        platform_order_id="1",
        order_number="1001",
        customer_email="a@b.c",
        total_amount=Decimal("10.00"),
        line_items=[line],
    )
    assert stored.apply(same) is False
    assert stored.updated_at == before

    moved = OrderRecord(
        platform_order_id="1",
        order_number="1001",
        customer_email="a@b.c",
        status=OrderStatus.SHIPPED,
        total_amount=Decimal("10.00"),
        line_items=[line],
    )
    assert stored.apply(moved) is True
    assert stored.status == OrderStatus.SHIPPED


def test_mapping_error_then_synced_clears_error():
    mapping = ProductMapping(local_type=LocalType.OFFERING, product_type=ProductType.PHYSICAL, local_id="o-1")
    mapping.mark_syncing()
    mapping.mark_error("boom", retryable=True)
    assert mapping.sync_status == SyncStatus.ERROR
    assert mapping.metadata["last_error"] == "boom"
    assert mapping.metadata["error_retryable"] is True

    mapping.mark_syncing()
    mapping.mark_synced("123", "456")
    assert mapping.sync_status == SyncStatus.SYNCED
    assert mapping.last_error is None
    assert "error_at" not in mapping.metadata
    assert mapping.platform_product_id == "123"
    assert mapping.platform_variant_id == "456"
    assert mapping.last_synced_at is not None


def test_digital_asset_expiry_boundary():
    now = utcnow()
    asset = DigitalAsset(
        order_id="o",
        platform_product_id="p",
        asset_type=AssetType.TRIBUTE,
        file_url="tributes/a.pdf",
        download_token="t",
        expires_at=now - timedelta(seconds=1),
    )
    assert asset.is_expired(now)

    asset.expires_at = now + timedelta(seconds=1)
    assert not asset.is_expired(now)

    asset.expires_at = None
    assert not asset.is_expired(now)
