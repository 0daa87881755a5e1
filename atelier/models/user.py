"""User model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base, utcnow


class User(Base):
    """Registered artist account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Stored lower-cased; the unique index is what actually serializes racing signups
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String)
    name: Mapped[str] = mapped_column(String)

    # Embedded artist profile, replaced wholesale on profile updates
    artist_profile: Mapped[dict | None] = mapped_column(JSON, default=None)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    last_login_at: Mapped[datetime | None] = mapped_column(DateTime, default=None)
