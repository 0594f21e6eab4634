"""Shared fixtures: in-memory database and fake collaborators."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.data.models.base import Base
from core.infrastructure.adapters.notifications.mock_order_mailer import MockOrderMailer
from tests.mocks import FakeCommerceGateway, FakeStorageClient, make_order_payload


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def gateway() -> FakeCommerceGateway:
    return FakeCommerceGateway()


@pytest.fixture
def storage() -> FakeStorageClient:
    return FakeStorageClient()


@pytest.fixture
def mailer() -> MockOrderMailer:
    return MockOrderMailer()


@pytest.fixture
def order_payload() -> dict:
    return make_order_payload()
