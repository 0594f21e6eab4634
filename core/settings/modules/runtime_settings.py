from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import CommerceBaseSettings


class RuntimeSettings(CommerceBaseSettings):
    """Environment switches and download-link lifetimes."""

    app_env: str = Field("production", alias="APP_ENV")
    allow_unverified_webhooks: bool = Field(False, alias="ALLOW_UNVERIFIED_WEBHOOKS")
    download_link_ttl_days: int = Field(30, alias="DOWNLOAD_LINK_TTL_DAYS", ge=1)
    signed_url_ttl_seconds: int = Field(3600, alias="SIGNED_URL_TTL_SECONDS", ge=1)

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    @property
    def webhook_bypass_enabled(self) -> bool:
        """Unsigned webhooks are accepted only outside production."""
        return self.allow_unverified_webhooks and not self.is_production
