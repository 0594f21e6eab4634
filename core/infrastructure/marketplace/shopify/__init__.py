"""Shopify marketplace integration."""

from .client import ShopifyApiError, ShopifyClient
from .mapper import ShopifyOrderMapper, ShopifyProductMapper

__all__ = ["ShopifyApiError", "ShopifyClient", "ShopifyOrderMapper", "ShopifyProductMapper"]
