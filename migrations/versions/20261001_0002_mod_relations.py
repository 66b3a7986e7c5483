"""Add mod downloads, screenshots and linked sources."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261001_0002"
down_revision = "20261001_0001"
branch_labels = None
depends_on = None


def _mod_url_column() -> sa.Column:
    return sa.Column(
        "mod_url",
        sa.String(length=255),
        sa.ForeignKey("mods.url", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "mod_downloads",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _mod_url_column(),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.UniqueConstraint("mod_url", "url", name="uq_mod_download"),
    )
    op.create_index("ix_mod_downloads_mod_url", "mod_downloads", ["mod_url"])

    op.create_table(
        "mod_screenshots",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _mod_url_column(),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.UniqueConstraint("mod_url", "url", name="uq_mod_screenshot"),
    )
    op.create_index("ix_mod_screenshots_mod_url", "mod_screenshots", ["mod_url"])

    op.create_table(
        "mod_sources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _mod_url_column(),
        sa.Column(
            "source_url",
            sa.String(length=255),
            sa.ForeignKey("sources.url", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.UniqueConstraint("mod_url", "source_url", name="uq_mod_source"),
    )
    op.create_index("ix_mod_sources_mod_url", "mod_sources", ["mod_url"])
    op.create_index("ix_mod_sources_source_url", "mod_sources", ["source_url"])


def downgrade() -> None:
    op.drop_index("ix_mod_sources_source_url", table_name="mod_sources")
    op.drop_index("ix_mod_sources_mod_url", table_name="mod_sources")
    op.drop_table("mod_sources")
    op.drop_index("ix_mod_screenshots_mod_url", table_name="mod_screenshots")
    op.drop_table("mod_screenshots")
    op.drop_index("ix_mod_downloads_mod_url", table_name="mod_downloads")
    op.drop_table("mod_downloads")
