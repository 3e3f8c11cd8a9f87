"""
Database session management with async SQLAlchemy 2.0.
Handles connection pooling and session lifecycle.
"""

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from typing import AsyncGenerator

from payterms.core.config import settings
from payterms.core.logging import get_logger
from payterms.db.base import Base

logger = get_logger(__name__)

# Global engine and sessionmaker
engine = None
async_session_maker: async_sessionmaker[AsyncSession] = None


def create_engine():
    """Create async SQLAlchemy engine with connection pooling."""
    global engine

    engine_kwargs = {"echo": False}
    if not settings.DATABASE_URL.startswith("sqlite"):
        # SQLite uses a static/singleton pool and rejects sizing arguments
        engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

    engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

    logger.info(
        "Database engine created",
        extra={
            "pool_size": engine_kwargs.get("pool_size"),
            "max_overflow": engine_kwargs.get("max_overflow"),
        },
    )

    return engine


def create_sessionmaker():
    """Create async sessionmaker."""
    global async_session_maker

    if engine is None:
        create_engine()

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info("Sessionmaker created")
    return async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session and ensures it's closed after use.
    """
    if async_session_maker is None:
        create_sessionmaker()

    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database connection and create the payment term table."""
    if engine is None:
        create_engine()

    if async_session_maker is None:
        create_sessionmaker()

    # Register models on Base.metadata
    import payterms.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database initialized")


async def close_db() -> None:
    """Close database connections."""
    global engine

    if engine:
        await engine.dispose()
        logger.info("Database connections closed")
