"""
Database connection management.

Provides the async SQLAlchemy engine over SQLite (aiosqlite), the session
factory and table creation used at application startup.

Dependencies: sqlalchemy, aiosqlite, ragchat.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ragchat.boundary.db.base import Base
from ragchat.configs import DatabaseSettings, get_settings


def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    """Enable WAL so scans can run while a batch insert holds the write lock."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def get_async_engine(db_config: DatabaseSettings | None = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine for the chunk database.

    An in-memory database is bound to a single shared connection
    (StaticPool); otherwise every pooled connection would see its own
    empty database.

    Args:
        db_config: Database settings (defaults to application settings)

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = db_config or get_settings().database

    if db_config.path == ":memory:":
        engine = create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )

    event.listen(engine.sync_engine, "connect", _set_sqlite_pragmas)
    return engine


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Returns async_sessionmaker bound to engine with autoflush=False for
    explicit transaction control and predictable behavior.

    Args:
        engine: Engine created by get_async_engine()

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            async with session.begin():
                session.add(obj)
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: issues CREATE TABLE IF NOT EXISTS for each model.

    Args:
        engine: Target engine
    """
    # Import models to register them with Base.metadata
    from ragchat.boundary.db.models import ChunkModel  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
