"""
Covid Portal Backend - Database Session Management
====================================================

What:  Async SQLAlchemy engine construction, session factory, and FastAPI dependency.
How:   create_app() builds ONE engine at startup and stores it, together with
       its session factory, on app.state. Route handlers receive a session
       per request through get_db_session(), which reads the factory from the
       running application instead of from a module-level global.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created once per application; sessions are created per-request.

Driver:
    aiosqlite gives SQLite non-blocking access, so a request waiting on the
    database suspends instead of blocking the event loop.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    The tables themselves are provisioned outside this service; the metadata
    is only used to describe them (and by the test suite to create them).
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    What:  Creates the async engine that owns the database connection(s).
    When:  Once, from create_app(). The engine connects lazily on first query.
    """
    return create_async_engine(database_url, echo=echo)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    What:  Creates AsyncSession instances bound to the application's engine.

    expire_on_commit=False keeps loaded attributes readable after a service
    commits, so responses can be built from the same ORM objects.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Looks up the session factory the app was built with
        2. Yields a fresh session to the route handler
        3. On error: rolls back anything left uncommitted
        4. Always: closes the session (releases the connection)

    Services commit their own writes before returning, so a response is
    never sent for a write that has not reached the database.

    Example usage in a route:
        @router.get("/states/")
        async def list_states(db: AsyncSession = Depends(get_db_session)):
            return await state_service.list_states(db)
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections held by the engine.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
