"""Initial catalog schema: categories, sources, mods."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261001_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("url", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "parent_id",
            sa.Integer(),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("icon", sa.String(length=512), nullable=True),
        sa.Column("has_bg", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_categories_url", "categories", ["url"], unique=True)

    op.create_table(
        "sources",
        sa.Column("url", sa.String(length=255), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("classes", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(length=512), nullable=True),
        sa.Column("banner", sa.String(length=512), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "mods",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("url", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "category_id",
            sa.Integer(),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("description_short", sa.Text(), nullable=False, server_default=""),
        sa.Column("install", sa.Text(), nullable=True),
        sa.Column("banner", sa.String(length=512), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_mods_url", "mods", ["url"], unique=True)
    op.create_index("ix_mods_category_id", "mods", ["category_id"])


def downgrade() -> None:
    op.drop_index("ix_mods_category_id", table_name="mods")
    op.drop_index("ix_mods_url", table_name="mods")
    op.drop_table("mods")
    op.drop_table("sources")
    op.drop_index("ix_categories_url", table_name="categories")
    op.drop_table("categories")
