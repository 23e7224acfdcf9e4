"""Product model — a client's target profile, used only as scoring input."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class Product(Base):
    """Product and the company profile it targets."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    target_industries: Mapped[list | None] = mapped_column(JSON, nullable=True)
    target_employee_min: Mapped[int | None] = mapped_column(Integer, default=0, nullable=True)
    target_employee_max: Mapped[int | None] = mapped_column(Integer, default=10000, nullable=True)
    target_revenue: Mapped[dict | None] = mapped_column(JSON, nullable=True)  # {"min": .., "max": ..}
    target_locations: Mapped[list | None] = mapped_column(JSON, nullable=True)
    keywords: Mapped[list | None] = mapped_column(JSON, nullable=True)
    benefits: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    client: Mapped["Client"] = relationship("Client", back_populates="products")
