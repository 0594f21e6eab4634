from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import CommerceBaseSettings


class EmailSettings(CommerceBaseSettings):
    """
    Order email settings.
    Loaded from .env file with exact variable name matching.
    """

    enabled: bool = Field(False, alias="EMAIL_ENABLED")
    resend_api_key: str = Field("", alias="RESEND_API_KEY")
    from_email: str = Field("noreply@beiza.com", alias="RESEND_FROM_EMAIL")
