"""
Database engine (connection pool) and session management

The engine is created once by the application lifespan and stored on
`app.state`; handlers receive sessions through the `get_db` dependency.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from codequest_api.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the shared async engine. Raises RuntimeError if DATABASE_URL is unset.
    """
    url = settings.database_url
    options: dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,  # Ping before using a connection
    }

    backend = make_url(url).get_backend_name()
    if backend == "postgresql":
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            connect_args={
                "timeout": 10,  # Connection timeout
                "command_timeout": 60,  # Command timeout
            },
        )

    return create_async_engine(url, **options)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """Round-trip a trivial query; any failure propagates to the caller"""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def get_db(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions from the app's pool
    """
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
