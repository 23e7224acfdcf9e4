"""IntentProfile model — latest intent analysis per company, replaced wholesale."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class IntentProfile(Base):
    """One row per company; every analysis overwrites every field."""

    __tablename__ = "intent_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    intent_score: Mapped[int] = mapped_column(Integer, nullable=False)
    intent_level: Mapped[str] = mapped_column(String(16), nullable=False)
    buying_stage: Mapped[str] = mapped_column(String(32), nullable=False)
    signals: Mapped[list | None] = mapped_column(JSON, nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_hiring: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    job_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    hiring_urgency: Mapped[str | None] = mapped_column(String(16), nullable=True)
    has_recent_funding: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    social_activity: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    snapshot: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    analyzed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    company: Mapped["Company"] = relationship("Company", back_populates="intent_profile")
