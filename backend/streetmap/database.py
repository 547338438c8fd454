"""
StreetMap Backend — Database Engine & Session Management
==========================================================

What:  Async SQLAlchemy engine construction, session factory, declarative base
       and the FastAPI session dependency.
How:   The app factory builds one engine and one session factory and stores
       them on `app.state`. Each request gets its own AsyncSession from that
       factory; nothing here holds a module-level connection.
Who:   main.py (build/dispose), repositories (via the session dependency),
       tests (in-memory SQLite engine passed to create_app).

Connection Pooling:
    PostgreSQL: pool_size / max_overflow / pre_ping come from settings,
                connections are recycled hourly.
    SQLite:     pool arguments are not accepted; in-memory URLs get a
                StaticPool so every session sees the same database.
"""

from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from streetmap.config import Settings


# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONVariant = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def build_engine(settings: Settings, url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for `url` (defaults to settings.database_url).

    Creating the engine does not open a connection; an unreachable database
    only surfaces on first use.
    """
    url = url or settings.database_url
    echo = settings.log_level == "DEBUG"

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if make_url(url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_async_engine(url, echo=echo, **kwargs)

    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: records stay readable after the repository commits
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    # Model modules must be imported so their tables register on Base.metadata
    from streetmap.models import line, street  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Repositories commit their own writes, so this only has to roll back
    whatever is left open when the handler fails, and always close the
    session to return the connection to the pool.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
