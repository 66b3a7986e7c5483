"""Database session and engine helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import Session, sessionmaker

from catalog_api.config.settings import PROJECT_ROOT, get_settings

from .base import Base
from . import models  # noqa: F401  # ensure models are imported for metadata

DEFAULT_DB_PATH = PROJECT_ROOT / "var" / "data" / "catalog.db"

T = TypeVar("T")


def _resolve_database_url() -> str:
    raw_url = get_settings().database_url
    if not raw_url:
        DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{DEFAULT_DB_PATH.as_posix()}"

    url: URL = make_url(raw_url)
    if url.drivername.startswith("sqlite") and url.database and url.database != ":memory:":
        db_path = Path(url.database)
        if not db_path.is_absolute():
            db_path = PROJECT_ROOT / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        url = url.set(database=str(db_path))
    return url.render_as_string(hide_password=False)


def _configure_sqlite(bind: Engine) -> None:
    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT; emit it ourselves.
    @event.listens_for(bind, "connect")
    def _on_connect(dbapi_connection, _connection_record) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(bind, "begin")
    def _on_begin(connection) -> None:
        connection.exec_driver_sql("BEGIN")


def create_catalog_engine(database_url: str) -> Engine:
    is_sqlite = database_url.startswith("sqlite")
    connect_args: dict[str, object] = {"check_same_thread": False} if is_sqlite else {}
    bind = create_engine(
        database_url,
        echo=False,
        future=True,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    if is_sqlite:
        _configure_sqlite(bind)
    return bind


def create_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autocommit=False,
        autoflush=False,
        future=True,
        expire_on_commit=False,
    )


DATABASE_URL = _resolve_database_url()

engine: Engine = create_catalog_engine(DATABASE_URL)

SessionLocal = create_session_factory(engine)


def run_in_session(
    func: Callable[[Session], T],
    *,
    session_factory: sessionmaker[Session] | None = None,
) -> T:
    """Run ``func`` inside one transaction, committing on success."""

    factory = session_factory or SessionLocal
    with factory() as session:
        try:
            result = func(session)
            session.commit()
        except Exception:
            session.rollback()
            raise
        return result


__all__ = [
    "Base",
    "DATABASE_URL",
    "SessionLocal",
    "create_catalog_engine",
    "create_session_factory",
    "engine",
    "run_in_session",
]
