"""
Database Engine Module

Builds synchronous and asynchronous SQLAlchemy engines from configuration,
supporting SQLite, MySQL and PostgreSQL.

Repositories never create or dispose engines themselves; callers build one
here (or anywhere else) and hand it over.
"""

from typing import Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sqlrepo.config import get_settings


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(
    url: Optional[str] = None,
    echo: Optional[bool] = None,
    database_type: Optional[str] = None,
    **kwargs,
) -> Engine:
    """
    Create synchronous database engine

    Args:
        url: Connection string, defaults to DATABASE_URL
        echo: Print SQL statements, defaults to DEBUG
        database_type: sqlite, mysql or postgresql, defaults to DATABASE_TYPE
        **kwargs: Extra arguments passed to create_engine

    Returns:
        Engine: SQLAlchemy engine
    """
    settings = get_settings()
    database_type = database_type or settings.DATABASE_TYPE
    if database_type == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(
        url or settings.DATABASE_URL,
        echo=settings.DEBUG if echo is None else echo,
        **kwargs,
    )

    # Enable foreign keys for SQLite
    if database_type == "sqlite":
        event.listen(engine, "connect", _set_sqlite_pragma)

    return engine


def create_async_db_engine(
    url: Optional[str] = None,
    echo: Optional[bool] = None,
    database_type: Optional[str] = None,
    **kwargs,
) -> AsyncEngine:
    """
    Create asynchronous database engine

    Args:
        url: Connection string, defaults to ASYNC_DATABASE_URL
        echo: Print SQL statements, defaults to DEBUG
        database_type: sqlite, mysql or postgresql, defaults to DATABASE_TYPE
        **kwargs: Extra arguments passed to create_async_engine

    Returns:
        AsyncEngine: SQLAlchemy async engine
    """
    settings = get_settings()
    database_type = database_type or settings.DATABASE_TYPE
    if database_type == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_async_engine(
        url or settings.ASYNC_DATABASE_URL,
        echo=settings.DEBUG if echo is None else echo,
        **kwargs,
    )

    if database_type == "sqlite":
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)

    return engine
