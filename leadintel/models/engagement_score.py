"""EngagementScore model — running per (company, project) engagement aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class EngagementScore(Base):
    """Channel-decomposed engagement score. total_score == sum of the four channels."""

    __tablename__ = "engagement_scores"

    __table_args__ = (
        UniqueConstraint("company_id", "project_id", name="uq_engagement_scores_company_project"),
        Index("ix_engagement_scores_project_total", "project_id", "total_score"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    call_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    document_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    web_activity_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    social_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    score_trend: Mapped[str] = mapped_column(String(16), default="stable", nullable=False)
    alert_level: Mapped[str] = mapped_column(String(16), default="none", nullable=False)
    last_activity_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    calculated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    company: Mapped["Company"] = relationship("Company", back_populates="engagement_scores")
