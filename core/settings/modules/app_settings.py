from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.infrastructure.database.config import DatabaseSettings
from core.settings.modules.email_settings import EmailSettings
from core.settings.modules.runtime_settings import RuntimeSettings
from core.settings.modules.shopify_settings import ShopifySettings
from core.settings.modules.storage_settings import StorageSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    shopify: ShopifySettings
    storage: StorageSettings
    email: EmailSettings
    runtime: RuntimeSettings
    database: DatabaseSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        shopify=ShopifySettings(),
        storage=StorageSettings(),
        email=EmailSettings(),
        runtime=RuntimeSettings(),
        database=DatabaseSettings(),
    )
