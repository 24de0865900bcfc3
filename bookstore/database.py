"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Bookstore API.

We use SYNCHRONOUS SQLAlchemy: every operation in this API is a short
single-record or simple-query round trip, so async buys nothing here.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Services commit on success; an exception leaves the work uncommitted
4. Close session when request ends

This is implemented using FastAPI's dependency injection.
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (server databases only,
#   SQLite's default pools reject them)
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements (useful for debugging, disable in production)

def _engine_options() -> dict[str, Any]:
    """Build create_engine() keyword arguments for the configured backend."""
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.debug,
    }
    if settings.is_sqlite:
        # FastAPI may run sync endpoints in a threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


engine = create_engine(settings.database_url, **_engine_options())


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit (explicit is better than implicit)
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models inherit from this class:

        class Book(Base):
            __tablename__ = "books"
            ...

    Alembic uses Base.metadata to discover models for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when
    the request ends (the finally block runs even if an exception occurs).

    Usage in Routes:
        from bookstore.dependencies import DbSession

        @router.get("/books/")
        def list_books(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, use Alembic
    migrations instead: this does not track schema changes.
    """
    # Importing the models registers them on Base.metadata
    import bookstore.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and tests only.
    """
    import bookstore.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
