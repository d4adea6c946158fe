# backend/inquiry_desk/core/database.py
import asyncio
from collections.abc import AsyncGenerator, Awaitable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from inquiry_desk.core.config import settings
from inquiry_desk.core.errors import StorageError


T = TypeVar("T")

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
    """Yield one database session per request."""
    async with async_session_factory() as session:
        yield session


async def store_call(awaitable: Awaitable[T], timeout: float | None = None) -> T:
    """Await a store operation under the configured timeout.

    Driver errors and timeouts both surface as StorageError.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout or settings.store_timeout_seconds)
    except asyncio.TimeoutError as e:
        raise StorageError(f"Store operation timed out: {e}") from e
    except SQLAlchemyError as e:
        raise StorageError(f"Store operation failed: {e}") from e
