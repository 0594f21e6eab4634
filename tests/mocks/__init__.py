"""Test doubles for outbound collaborators."""

from .fake_commerce_gateway import FakeCommerceGateway
from .fake_storage_client import FakeStorageClient
from .payloads import WEBHOOK_SECRET, make_order_payload

__all__ = ["FakeCommerceGateway", "FakeStorageClient", "WEBHOOK_SECRET", "make_order_payload"]
