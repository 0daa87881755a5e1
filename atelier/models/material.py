"""Art material model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from atelier.core.database import Base, utcnow


class Material(Base):
    """Studio supply, either in stock or on the wishlist."""

    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    name: Mapped[str] = mapped_column(String)
    category: Mapped[str] = mapped_column(String)  # paints, brushes, surfaces, mediums, other
    quantity: Mapped[float] = mapped_column(Float, default=0)
    brand: Mapped[str | None] = mapped_column(String)
    color: Mapped[str | None] = mapped_column(String)
    unit: Mapped[str | None] = mapped_column(String)
    min_quantity: Mapped[float | None] = mapped_column(Float)
    purchase_url: Mapped[str | None] = mapped_column(String)
    price: Mapped[float | None] = mapped_column(Float)
    notes: Mapped[str | None] = mapped_column(Text)

    is_wishlist: Mapped[bool] = mapped_column(Boolean, default=False)
    last_purchased: Mapped[datetime | None] = mapped_column(DateTime)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
