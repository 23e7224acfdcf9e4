"""Company model — a prospect with firmographics, enrichment and its fit score."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class Company(Base):
    """Prospect company.

    ``rank``/``score``/``score_reasons`` are written by the fit scorer and only
    change on an explicit re-score. ``enrichment`` holds optional externally
    sourced fields (revenue, capital, listing_status, grade, website, email,
    ceo, founded, summary).
    """

    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    project_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    employees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    website: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    enrichment: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    rank: Mapped[str | None] = mapped_column(String(1), nullable=True)
    score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    score_reasons: Mapped[list | None] = mapped_column(JSON, nullable=True)
    scored_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=True,
    )

    client: Mapped["Client"] = relationship("Client", back_populates="companies")
    project: Mapped["Project"] = relationship("Project", back_populates="companies")
    intent_profile: Mapped["IntentProfile"] = relationship(
        "IntentProfile",
        back_populates="company",
        uselist=False,
        cascade="all, delete-orphan",
    )
    engagement_scores: Mapped[list["EngagementScore"]] = relationship(
        "EngagementScore", back_populates="company", cascade="all, delete-orphan"
    )
    call_logs: Mapped[list["CallLog"]] = relationship(
        "CallLog", back_populates="company", cascade="all, delete-orphan"
    )
