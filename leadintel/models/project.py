"""Project model — a sales campaign run for a client."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base

PROJECT_STATUSES: tuple[str, ...] = ("draft", "active", "paused", "completed", "archived")


class Project(Base):
    """Campaign. min_appointment_rate is a percentage used by the pivot alert detector."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(32), default="active", nullable=False)
    min_appointment_rate: Mapped[float | None] = mapped_column(Float, default=50.0, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    client: Mapped["Client"] = relationship("Client", back_populates="projects")
    product: Mapped["Product"] = relationship("Product")
    companies: Mapped[list["Company"]] = relationship("Company", back_populates="project")
    pivot_alerts: Mapped[list["PivotAlert"]] = relationship(
        "PivotAlert", back_populates="project", cascade="all, delete-orphan"
    )
