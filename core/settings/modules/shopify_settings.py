from __future__ import annotations

import logging
import re

from pydantic import Field, field_validator

from core.settings.base_settings import CommerceBaseSettings

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-01"
_STORE_DOMAIN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*\.myshopify\.com$")
_API_VERSION = re.compile(r"^\d{4}-\d{2}$")


class ShopifySettings(CommerceBaseSettings):
    """
    Shopify Admin API and webhook settings.
    Loaded from .env file with exact variable name matching.
    """

    store_domain: str = Field("", alias="SHOPIFY_STORE_DOMAIN")
    admin_api_token: str = Field("", alias="SHOPIFY_ADMIN_API_TOKEN")
    api_version: str = Field(DEFAULT_API_VERSION, alias="SHOPIFY_API_VERSION")
    webhook_secret: str = Field("", alias="SHOPIFY_WEBHOOK_SECRET")
    timeout_seconds: float = Field(30.0, alias="SHOPIFY_TIMEOUT_SECONDS")

    @field_validator("store_domain")
    @classmethod
    def _check_store_domain(cls, value: str) -> str:
        value = (value or "").strip().lower()
        if value.startswith("https://"):
            value = value[len("https://"):]
        value = value.rstrip("/")
        if value and not _STORE_DOMAIN.match(value):
            raise ValueError(f"SHOPIFY_STORE_DOMAIN must be a *.myshopify.com domain, got: {value}")
        return value

    @field_validator("api_version")
    @classmethod
    def _check_api_version(cls, value: str) -> str:
        if not value or not _API_VERSION.match(value.strip()):
            logger.warning(
                f"Invalid SHOPIFY_API_VERSION {value!r}, falling back to {DEFAULT_API_VERSION}"
            )
            return DEFAULT_API_VERSION
        return value.strip()

    @property
    def is_configured(self) -> bool:
        return bool(self.store_domain and self.admin_api_token)

    @property
    def base_url(self) -> str:
        return f"https://{self.store_domain}/admin/api/{self.api_version}"
