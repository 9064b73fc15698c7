"""
Async engine and per-request sessions.

Stores commit their own writes, so a request session only needs opening and
closing; anything left uncommitted is rolled back when it closes.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from pokedeck.config import settings
from pokedeck.models.db import Base

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency providing a session scoped to one request."""
    async with async_session_factory() as session:
        yield session


async def init_db() -> None:
    """Create missing tables; called once at startup."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_db() -> None:
    """Close pooled connections; called once at shutdown."""
    await engine.dispose()
