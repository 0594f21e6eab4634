# Settings modules
from .app_settings import AppSettings, get_app_settings
from .email_settings import EmailSettings
from .runtime_settings import RuntimeSettings
from .shopify_settings import ShopifySettings
from .storage_settings import StorageSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "EmailSettings",
    "RuntimeSettings",
    "ShopifySettings",
    "StorageSettings",
]
