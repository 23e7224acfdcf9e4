"""PivotAlert model — campaign-level threshold alerts."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from leadintel.db.session import Base


class PivotAlert(Base):
    """Alert that a project's conversion metrics warrant a strategy change."""

    __tablename__ = "pivot_alerts"

    __table_args__ = (
        Index("ix_pivot_alerts_project_status", "project_id", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    alert_type: Mapped[str] = mapped_column(String(32), nullable=False)
    severity: Mapped[str] = mapped_column(String(16), default="warning", nullable=False)
    current_metrics: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    threshold_metrics: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    rejection_analysis: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    pivot_suggestions: Mapped[list | None] = mapped_column(JSON, nullable=True)
    recommended_action: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(16), default="active", nullable=False)
    acknowledged_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    acknowledged_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    project: Mapped["Project"] = relationship("Project", back_populates="pivot_alerts")
