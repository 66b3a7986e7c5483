"""Helpers to apply Alembic migrations programmatically."""

from __future__ import annotations

from alembic import command
from alembic.config import Config

from catalog_api.config.settings import PROJECT_ROOT

from .session import DATABASE_URL


def upgrade_database(database_url: str | None = None) -> None:
    """Run Alembic migrations up to the latest revision."""

    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    # Prevent Alembic from overriding the application's logging configuration.
    alembic_cfg.attributes["configure_logger"] = False
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    alembic_cfg.set_main_option("sqlalchemy.url", (database_url or DATABASE_URL).replace("%", "%%"))
    command.upgrade(alembic_cfg, "head")


__all__ = ["upgrade_database"]
