"""Database utilities exposed for the catalog service."""

from .base import Base
from .session import (
    DATABASE_URL,
    SessionLocal,
    create_catalog_engine,
    create_session_factory,
    engine,
    run_in_session,
)

__all__ = [
    "Base",
    "DATABASE_URL",
    "SessionLocal",
    "create_catalog_engine",
    "create_session_factory",
    "engine",
    "run_in_session",
]
