from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from typing import AsyncGenerator
from datetime import datetime, timezone
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def create_engine_for_url(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, applying pool sizing only where the driver supports it"""
    engine_kwargs = {"echo": settings.DATABASE_ECHO}
    if not _is_sqlite(url):
        engine_kwargs.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    engine_kwargs.update(kwargs)

    async_engine = create_async_engine(url, **engine_kwargs)

    if _is_sqlite(url):
        # SQLite leaves foreign keys unenforced unless asked per connection
        @event.listens_for(async_engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return async_engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


engine = create_engine_for_url(settings.DATABASE_URL)
AsyncSessionLocal = create_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request"""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine = None) -> None:
    """Create database tables"""
    # Import models so they register on the metadata
    import app.models  # noqa: F401

    target = bind or engine
    try:
        async with target.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables initialized")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


async def close_db() -> None:
    """Dispose the engine connection pool"""
    await engine.dispose()
    logger.info("Database connections closed")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
