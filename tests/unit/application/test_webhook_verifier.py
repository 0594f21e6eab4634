"""Unit tests for webhook HMAC verification."""
import pytest

from core.application.services.webhook_verifier import WebhookVerifier, compute_signature
from core.domain.errors import WebhookVerificationError
from core.settings.modules.runtime_settings import RuntimeSettings
from core.settings.modules.shopify_settings import ShopifySettings

SECRET = "shpss_test_secret"
BODY = b'{"order": {"id": 1}}'


def test_valid_signature_passes():
    WebhookVerifier(SECRET).verify(BODY, compute_signature(SECRET, BODY))


def test_signature_is_base64_hmac_sha256():
    # echo -n 'hello' | openssl dgst -sha256 -hmac key -binary | base64
    assert compute_signature("key", b"hello") == "kwezuRXvtRcf8U2MtV+8x5jGwO8UVtZt7RpqpyOli3s="


def test_tampered_body_is_rejected():
    signature = compute_signature(SECRET, BODY)
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier(SECRET).verify(b'{"order": {"id": 2}}', signature)


def test_missing_signature_is_rejected():
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier(SECRET).verify(BODY, None)


def test_non_ascii_signature_is_rejected():
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier(SECRET).verify(BODY, "sïgnature")


def test_fails_closed_without_secret():
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier("").verify(BODY, compute_signature("anything", BODY))


def test_bypass_requires_non_production():
    shopify = ShopifySettings(webhook_secret="")

    production = RuntimeSettings(app_env="production", allow_unverified_webhooks=True)
    with pytest.raises(WebhookVerificationError):
        WebhookVerifier.from_settings(shopify, production).verify(BODY, None)

    development = RuntimeSettings(app_env="development", allow_unverified_webhooks=True)
    WebhookVerifier.from_settings(shopify, development).verify(BODY, None)


def test_bypass_is_off_by_default():
    development = RuntimeSettings(app_env="development")
    assert development.webhook_bypass_enabled is False
