"""
SQLAlchemy async engine and session management.

Provides a factory for async engines, a session factory bound to an engine,
and lifecycle helpers for schema creation and shutdown.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from webinar_scheduler.core.logging import logger
from webinar_scheduler.infrastructure.implementations.sql.models import Base


def create_engine(
    url: str,
    *,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_recycle: int = 1800,
    echo: bool = False,
    use_null_pool: bool = False,
) -> AsyncEngine:
    """
    Create a new SQLAlchemy AsyncEngine.

    Args:
        url: Async database URL, e.g. ``postgresql+asyncpg://...`` or
            ``sqlite+aiosqlite:///./webinars.db``
        pool_size: Persistent connections kept in the pool
        max_overflow: Additional connections allowed beyond pool_size
        pool_recycle: Seconds after which a pooled connection is recycled
        echo: Log all emitted SQL statements
        use_null_pool: Disable pooling (short-lived processes, tests)

    Returns:
        Configured AsyncEngine
    """
    pool_kwargs: dict = {}
    if use_null_pool:
        pool_kwargs["poolclass"] = NullPool
    elif not url.startswith("sqlite"):
        # SQLite uses its own pool classes, which reject sizing arguments
        pool_kwargs.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_recycle=pool_recycle,
        )

    engine = create_async_engine(url, echo=echo, **pool_kwargs)
    logger.info(f"Created async engine for {url.split('@')[-1]}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory bound to the engine."""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables defined in the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created / verified")


async def dispose(engine: AsyncEngine) -> None:
    """Dispose of the engine and release pooled connections."""
    await engine.dispose()
    logger.info("Database engine disposed")
