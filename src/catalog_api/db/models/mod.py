"""ORM models for mods and their child relations."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ModRecord(Base):
    __tablename__ = "mods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description_short: Mapped[str] = mapped_column(Text, nullable=False, default="")
    install: Mapped[str | None] = mapped_column(Text, nullable=True)
    banner: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    downloads: Mapped[list["ModDownloadRecord"]] = relationship(
        "ModDownloadRecord",
        cascade="all, delete-orphan",
        order_by="ModDownloadRecord.id",
    )
    screenshots: Mapped[list["ModScreenshotRecord"]] = relationship(
        "ModScreenshotRecord",
        cascade="all, delete-orphan",
        order_by="ModScreenshotRecord.id",
    )
    sources: Mapped[list["ModSourceRecord"]] = relationship(
        "ModSourceRecord",
        cascade="all, delete-orphan",
        order_by="ModSourceRecord.id",
    )


class ModDownloadRecord(Base):
    __tablename__ = "mod_downloads"
    __table_args__ = (UniqueConstraint("mod_url", "url", name="uq_mod_download"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mod_url: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("mods.url", ondelete="CASCADE", onupdate="CASCADE"),
        index=True,
    )
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)


class ModScreenshotRecord(Base):
    __tablename__ = "mod_screenshots"
    __table_args__ = (UniqueConstraint("mod_url", "url", name="uq_mod_screenshot"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mod_url: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("mods.url", ondelete="CASCADE", onupdate="CASCADE"),
        index=True,
    )
    url: Mapped[str] = mapped_column(String(1024), nullable=False)


class ModSourceRecord(Base):
    """Links a mod to a source, with the mod's URL on that source."""

    __tablename__ = "mod_sources"
    __table_args__ = (UniqueConstraint("mod_url", "source_url", name="uq_mod_source"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mod_url: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("mods.url", ondelete="CASCADE", onupdate="CASCADE"),
        index=True,
    )
    source_url: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("sources.url", ondelete="CASCADE", onupdate="CASCADE"),
        index=True,
    )
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
