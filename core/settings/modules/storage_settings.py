from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import CommerceBaseSettings


class StorageSettings(CommerceBaseSettings):
    """
    Supabase storage settings (signed download URLs).
    Loaded from .env file with exact variable name matching.
    """

    supabase_url: str = Field("", alias="SUPABASE_URL")
    service_role_key: str = Field("", alias="SUPABASE_SERVICE_ROLE_KEY")
    timeout_seconds: float = Field(15.0, alias="STORAGE_TIMEOUT_SECONDS")
