"""Finished-art inventory and works-in-progress models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base, utcnow


class Artwork(Base):
    """Finished artwork in the inventory."""

    __tablename__ = "artworks"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    title: Mapped[str] = mapped_column(String)
    medium: Mapped[str] = mapped_column(String)
    year_completed: Mapped[int | None] = mapped_column(Integer)
    price: Mapped[float | None] = mapped_column(Float)
    location: Mapped[str | None] = mapped_column(String)
    dimensions: Mapped[str | None] = mapped_column(String)
    notes: Mapped[str | None] = mapped_column(Text)

    # Images: uploaded blob id, or external URLs for legacy entries
    storage_id: Mapped[str | None] = mapped_column(String)
    thumbnail_url: Mapped[str | None] = mapped_column(String)
    high_res_url: Mapped[str | None] = mapped_column(String)

    archived: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class Piece(Base):
    """Work in progress."""

    __tablename__ = "pieces"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    title: Mapped[str] = mapped_column(String)
    deadline: Mapped[str | None] = mapped_column(String)  # ISO date
    status: Mapped[str] = mapped_column(String, default="not-started")  # not-started, in-progress, completed
    type: Mapped[str | None] = mapped_column(String)  # commission, gallery, exploration

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class PieceNote(Base):
    """Timeline note on a work in progress."""

    __tablename__ = "piece_notes"

    id: Mapped[int] = mapped_column(primary_key=True)
    piece_id: Mapped[int] = mapped_column(ForeignKey("pieces.id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    text: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class PieceImage(Base):
    """Progress photo on a work in progress."""

    __tablename__ = "piece_images"

    id: Mapped[int] = mapped_column(primary_key=True)
    piece_id: Mapped[int] = mapped_column(ForeignKey("pieces.id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    storage_id: Mapped[str | None] = mapped_column(String)
    url: Mapped[str | None] = mapped_column(String)
    caption: Mapped[str | None] = mapped_column(String)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
