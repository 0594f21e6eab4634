"""
Database configuration.

Manages database connection settings and engine creation. Engines and
session factories are built by the application lifespan and passed
around explicitly.
"""
from typing import Optional
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine


logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables (DB_ prefix) or .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DB_", extra="ignore")

    # Database URL
    database_url: str = "sqlite+aiosqlite:///./commerce_sync.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings (read from environment if omitted)

    Returns:
        Configured async engine
    """
    settings = settings or DatabaseSettings()
    logger.info(f"Creating database engine: {settings.database_url.split('@')[-1]}")

    if settings.is_sqlite:
        return create_async_engine(settings.database_url, echo=settings.echo_sql)

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# =============================================================================
# SESSION FACTORY
# =============================================================================

def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Build the session factory shared by every Unit of Work.

    Returns:
        Session factory bound to the engine
    """
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(engine: AsyncEngine) -> None:
    """
    Initialize database.

    Creates all tables if they don't exist.
    """
    from core.data.models import Base

    logger.info("Initializing database...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Database initialized successfully")


async def close_database(engine: AsyncEngine) -> None:
    """Close database connections."""
    logger.info("Closing database connections...")
    await engine.dispose()
    logger.info("✅ Database connections closed")
