"""
Webhook signature verification.

Shopify signs the raw request body with HMAC-SHA256 and sends the
base64 digest in `X-Shopify-Hmac-SHA256`.
"""
import base64
import hashlib
import hmac
import logging
from typing import Optional

from core.domain.errors import WebhookVerificationError
from core.settings.modules.runtime_settings import RuntimeSettings
from core.settings.modules.shopify_settings import ShopifySettings


logger = logging.getLogger(__name__)


def compute_signature(secret: str, raw_body: bytes) -> str:
    """Base64 HMAC-SHA256 of the raw body, as Shopify sends it."""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class WebhookVerifier:
    """
    Fail-closed HMAC verifier.

    Without a secret every webhook is rejected. The bypass only exists
    when explicitly allowed outside production.
    """

    def __init__(self, secret: Optional[str], allow_unverified: bool = False):
        self._secret = secret or ""
        self._allow_unverified = allow_unverified

    @classmethod
    def from_settings(cls, shopify: ShopifySettings, runtime: RuntimeSettings) -> "WebhookVerifier":
        return cls(shopify.webhook_secret, allow_unverified=runtime.webhook_bypass_enabled)

    def verify(self, raw_body: bytes, signature: Optional[str]) -> None:
        """
        Check the signature against the raw, unparsed body.

        Raises:
            WebhookVerificationError: No secret, no signature, or mismatch
        """
        if self._allow_unverified:
            logger.warning("⚠️ Accepting webhook WITHOUT signature verification (ALLOW_UNVERIFIED_WEBHOOKS)")
            return

        if not self._secret:
            raise WebhookVerificationError("Webhook secret is not configured")
        if not signature:
            raise WebhookVerificationError("Missing webhook signature")

        expected = compute_signature(self._secret, raw_body)
        if not hmac.compare_digest(expected.encode("ascii"), signature.strip().encode("utf-8")):
            raise WebhookVerificationError("Invalid webhook signature")
