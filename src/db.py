"""Database engine/session helpers."""

from __future__ import annotations

import os
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

DEFAULT_DB_URL = "sqlite:///parks.db"
DB_URL_ENV_VARS = ("PARK_VOTING_DATABASE_URL", "DATABASE_URL")


def resolve_db_url(db_url: str | None = None, *, fallback: str | None = None) -> str:
    """Pick the database URL.

    Resolution order: explicit ``db_url``, ``PARK_VOTING_DATABASE_URL``,
    ``DATABASE_URL``, ``fallback`` (usually the config file), then the local
    sqlite file.
    """
    if db_url:
        return db_url
    for name in DB_URL_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value
    return fallback or DEFAULT_DB_URL


def create_db_engine(db_url: str) -> Engine:
    """Create a SQLAlchemy engine with conservative defaults."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(db_url, pool_pre_ping=True, future=True)

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}, "future": True}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(db_url, **kwargs)
    event.listen(engine, "connect", _configure_sqlite_connection)
    event.listen(engine, "begin", _begin_immediate)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the provided engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


def _configure_sqlite_connection(dbapi_connection: Any, _connection_record: Any) -> None:
    # hand transaction control to SQLAlchemy so _begin_immediate decides the BEGIN
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _begin_immediate(connection: Connection) -> None:
    """Take the sqlite write lock up front so read-then-write votes serialize."""
    connection.exec_driver_sql("BEGIN IMMEDIATE")
