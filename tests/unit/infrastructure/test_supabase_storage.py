"""Unit tests for the Supabase storage signer."""
import pytest

from core.infrastructure.storage import StorageSigningError, SupabaseStorageClient
from core.settings.modules.storage_settings import StorageSettings
from tests.unit.infrastructure.fake_http import FakeResponse, FakeSession


@pytest.fixture
def settings() -> StorageSettings:
    return StorageSettings(supabase_url="https://abc.supabase.co/", service_role_key="service-key")


@pytest.mark.asyncio
async def test_signed_url_is_made_absolute(settings):
    session = FakeSession(FakeResponse(200, {"signedURL": "/object/sign/tributes/a/b.pdf?token=xyz"}))
    client = SupabaseStorageClient(settings, session=session)

    url = await client.create_signed_url("tributes", "a/b.pdf", 600)

    assert url == "https://abc.supabase.co/storage/v1/object/sign/tributes/a/b.pdf?token=xyz"
    request = session.requests[0]
    assert request["url"] == "https://abc.supabase.co/storage/v1/object/sign/tributes/a/b.pdf"
    assert request["json"] == {"expiresIn": 600}


@pytest.mark.asyncio
async def test_error_status_raises(settings):
    client = SupabaseStorageClient(settings, session=FakeSession(FakeResponse(404, {"error": "not found"})))

    with pytest.raises(StorageSigningError):
        await client.create_signed_url("tributes", "missing.pdf", 600)


@pytest.mark.asyncio
async def test_unconfigured_storage_raises():
    client = SupabaseStorageClient(StorageSettings(supabase_url="", service_role_key=""), session=FakeSession())

    with pytest.raises(StorageSigningError):
        await client.create_signed_url("tributes", "a.pdf", 600)
