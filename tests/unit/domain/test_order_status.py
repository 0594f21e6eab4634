"""Unit tests for order status derivation and order type."""
import pytest

from core.domain.enums import OrderStatus, OrderType


@pytest.mark.parametrize(
    "financial, fulfillment, expected",
    [
        ("paid", None, OrderStatus.CONFIRMED),
        ("paid", "fulfilled", OrderStatus.SHIPPED),
        ("paid", "partial", OrderStatus.PROCESSING),
        ("refunded", "fulfilled", OrderStatus.REFUNDED),
        ("voided", None, OrderStatus.CANCELLED),
        ("voided", "fulfilled", OrderStatus.CANCELLED),
        ("pending", None, OrderStatus.PENDING),
        ("authorized", None, OrderStatus.PENDING),
        (None, None, OrderStatus.PENDING),
        ("pending", "fulfilled", OrderStatus.SHIPPED),
    ],
)
def test_derive_status_first_match_wins(financial, fulfillment, expected):
    assert OrderStatus.derive(financial, fulfillment) == expected


def test_terminal_statuses():
    assert OrderStatus.CANCELLED.is_terminal
    assert OrderStatus.REFUNDED.is_terminal
    assert not OrderStatus.SHIPPED.is_terminal
    assert not OrderStatus.PENDING.is_terminal


@pytest.mark.parametrize(
    "tags, expected",
    [
        ("pre-order, memorial", OrderType.PRE_ORDER),
        ("memorial,Pre-Order", OrderType.PRE_ORDER),
        (["gift", "pre-order"], OrderType.PRE_ORDER),
        ("memorial", OrderType.ORDER),
        ("preorder", OrderType.ORDER),
        ("", OrderType.ORDER),
        (None, OrderType.ORDER),
    ],
)
def test_order_type_from_tags(tags, expected):
    assert OrderType.from_tags(tags) == expected
