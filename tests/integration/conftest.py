"""Pytest configuration and fixtures for API integration tests.

The ASGI transport does not run the lifespan, so every collaborator the
lifespan would put on `app.state` is supplied through dependency overrides.
"""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from apps.api.deps import (
    get_commerce_gateway,
    get_order_mailer,
    get_session_factory,
    get_settings,
    get_storage_client,
)
from apps.api.main import create_app
from core.infrastructure.database import DatabaseSettings
from core.settings import AppSettings
from core.settings.modules.email_settings import EmailSettings
from core.settings.modules.runtime_settings import RuntimeSettings
from core.settings.modules.shopify_settings import ShopifySettings
from core.settings.modules.storage_settings import StorageSettings
from tests.mocks import WEBHOOK_SECRET


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(
        shopify=ShopifySettings(
            store_domain="beiza-memorials.myshopify.com",
            admin_api_token="shpat_test",
            webhook_secret=WEBHOOK_SECRET,
        ),
        storage=StorageSettings(),
        email=EmailSettings(enabled=False),
        runtime=RuntimeSettings(app_env="production", signed_url_ttl_seconds=600),
        database=DatabaseSettings(),
    )


@pytest.fixture
def app(app_settings, session_factory, gateway, storage, mailer) -> FastAPI:
    """Create FastAPI app wired to the test database and fakes."""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: app_settings
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_commerce_gateway] = lambda: gateway
    app.dependency_overrides[get_storage_client] = lambda: storage
    app.dependency_overrides[get_order_mailer] = lambda: mailer
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
