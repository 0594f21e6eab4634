"""Shopify Admin API JSON to/from domain mapper."""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Tuple

from core.application.dtos.sync_dto import LocalProductEntity
from core.domain.entities import OrderRecord
from core.domain.enums import OrderStatus, OrderType, ProductType, map_product_type
from core.domain.value_objects import LineItem


SNAPSHOT_FIELDS = ("name", "financial_status", "fulfillment_status", "currency", "created_at", "updated_at")


def _decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value)) if value not in (None, "") else Decimal("0")
    except (InvalidOperation, ValueError):
        return Decimal("0")


class ShopifyOrderMapper:
    """Mapper for converting Shopify order JSON to OrderRecord."""

    @staticmethod
    def to_order_record(data: Dict[str, Any]) -> OrderRecord:
        """Convert a Shopify order payload to a fresh OrderRecord.

        The record carries a new local id; callers keep the stored id
        when the order already exists.

        Args:
            data: Order object from a webhook or GET /orders/{id}.json

        Returns:
            OrderRecord with derived status and order type

        Raises:
            ValueError: If the order id is missing
        """
        platform_order_id = data.get("id")
        if platform_order_id in (None, ""):
            raise ValueError("Shopify order data must contain 'id'")

        order_number = data.get("order_number")
        if order_number in (None, ""):
            order_number = str(data.get("name") or "").lstrip("#") or platform_order_id

        customer = data.get("customer") or {}
        email = data.get("email") or data.get("contact_email") or customer.get("email") or ""
        name = f"{customer.get('first_name') or ''} {customer.get('last_name') or ''}".strip()

        financial_status = data.get("financial_status")
        fulfillment_status = data.get("fulfillment_status")

        return OrderRecord(
            platform_order_id=str(platform_order_id),
            order_number=str(order_number),
            customer_email=email,
            customer_name=name or None,
            status=OrderStatus.derive(financial_status, fulfillment_status),
            order_type=OrderType.from_tags(data.get("tags")),
            total_amount=_decimal(data.get("total_price")),
            line_items=[
                ShopifyOrderMapper._map_line_item(item) for item in data.get("line_items") or []
            ],
            shipping_address=data.get("shipping_address") or None,
            raw_platform_snapshot={key: data.get(key) for key in SNAPSHOT_FIELDS},
        )

    @staticmethod
    def _map_line_item(item: Dict[str, Any]) -> LineItem:
        return LineItem(
            title=item.get("title") or item.get("name") or "",
            quantity=int(item.get("quantity") or 0),
            price=_decimal(item.get("price")),
        )


class ShopifyProductMapper:
    """Mapper between local product entities and Shopify product JSON."""

    @staticmethod
    def to_product_payload(entity: LocalProductEntity) -> Dict[str, Any]:
        """Build the `product` object for POST/PUT /products.

        Args:
            entity: Local entity being published

        Returns:
            Shopify product payload
        """
        product_type = map_product_type(entity.product_category)
        payload: Dict[str, Any] = {
            "title": entity.title,
            "body_html": entity.description or "",
            "product_type": (
                entity.product_category.value if entity.product_category else entity.local_type.value
            ),
            "tags": ", ".join(entity.tags),
            "status": entity.status,
        }

        if entity.price is not None or entity.sku or entity.inventory_quantity is not None:
            variant: Dict[str, Any] = {
                "requires_shipping": product_type == ProductType.PHYSICAL,
            }
            if entity.price is not None:
                variant["price"] = str(entity.price)
            if entity.sku:
                variant["sku"] = entity.sku
            if entity.inventory_quantity is not None:
                variant["inventory_quantity"] = entity.inventory_quantity
            payload["variants"] = [variant]

        return payload

    @staticmethod
    def extract_ids(product: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
        """Return (product_id, first_variant_id) as strings."""
        product_id = product.get("id")
        variants = product.get("variants") or []
        variant_id = variants[0].get("id") if variants else None
        return (
            str(product_id) if product_id is not None else None,
            str(variant_id) if variant_id is not None else None,
        )

    @staticmethod
    def to_metadata(product: Dict[str, Any]) -> Dict[str, Any]:
        """Platform-owned fields mirrored into mapping metadata."""
        return {
            "title": product.get("title"),
            "status": product.get("status"),
            "updated_at": product.get("updated_at"),
        }
