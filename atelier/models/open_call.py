"""Per-user open call models."""

from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base, utcnow


class SavedCallState(Base):
    """A user's bookmark/hide/application state for one open call."""

    __tablename__ = "saved_call_states"
    __table_args__ = (UniqueConstraint("user_id", "call_id", name="unique_user_call_state"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    call_id: Mapped[str] = mapped_column(String)  # external id from the curated list

    bookmarked: Mapped[bool] = mapped_column(Boolean, default=False)
    applied: Mapped[bool] = mapped_column(Boolean, default=False)
    hidden: Mapped[bool] = mapped_column(Boolean, default=False)
    application_status: Mapped[str | None] = mapped_column(String)  # submitted, accepted, rejected, waitlisted
    checklist: Mapped[list | None] = mapped_column(JSON)  # [{item, completed}]


class CustomOpenCall(Base):
    """Opportunity the user entered by hand."""

    __tablename__ = "custom_open_calls"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    title: Mapped[str] = mapped_column(String)
    organization: Mapped[str] = mapped_column(String)
    location: Mapped[str | None] = mapped_column(String)
    deadline: Mapped[str | None] = mapped_column(String)  # ISO date
    entry_fee: Mapped[float | None] = mapped_column(Float)
    description: Mapped[str | None] = mapped_column(Text)
    mediums: Mapped[list | None] = mapped_column(JSON)
    theme: Mapped[str | None] = mapped_column(String)
    url: Mapped[str | None] = mapped_column(String)
    type: Mapped[str | None] = mapped_column(String)  # exhibition, residency, grant, fellowship, commission

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
