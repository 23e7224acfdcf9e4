"""Client model — owner of companies, products and projects."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class Client(Base):
    """A customer account whose leads the engine scores."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    companies: Mapped[list["Company"]] = relationship("Company", back_populates="client")
    products: Mapped[list["Product"]] = relationship("Product", back_populates="client")
    projects: Mapped[list["Project"]] = relationship("Project", back_populates="client")
