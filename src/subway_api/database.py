"""Database connection and session management."""

import re
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


def transform_database_url_for_asyncpg(url: str) -> str:
    """Transform database URL for asyncpg compatibility.

    asyncpg doesn't support the 'sslmode' parameter - it uses 'ssl' instead.
    """
    return re.sub(r"sslmode=([\w-]+)", r"ssl=\1", url)


def transform_database_url_for_psycopg2(url: str) -> str:
    """Turn the API's asyncpg URL into one for Alembic's sync psycopg2 engine."""
    url = url.replace("postgresql+asyncpg://", "postgresql://")
    return re.sub(r"\bssl=([\w-]+)", r"sslmode=\1", url)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


# Lazy-loaded engine and session factory (avoids import-time errors for Alembic)
_engine = None
_async_session = None


def get_engine():
    """Get or create the async engine."""
    global _engine
    if _engine is None:
        from subway_api.config import settings

        db_url = transform_database_url_for_asyncpg(settings.database_url)
        _engine = create_async_engine(db_url, echo=False)
    return _engine


def get_session_factory():
    """Get or create the async session factory."""
    global _async_session
    if _async_session is None:
        _async_session = async_sessionmaker(
            get_engine(), class_=AsyncSession, expire_on_commit=False
        )
    return _async_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields a database session."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session
