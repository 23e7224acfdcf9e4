"""Pivot alert schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PivotSuggestion(BaseModel):
    title: str
    description: str
    priority: str


class PivotAlertRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    alert_type: str
    severity: str
    current_metrics: Optional[dict[str, Any]] = None
    threshold_metrics: Optional[dict[str, Any]] = None
    rejection_analysis: Optional[dict[str, Any]] = None
    pivot_suggestions: list[PivotSuggestion] = Field(default_factory=list)
    recommended_action: Optional[str] = None
    status: str
    acknowledged_by: Optional[str] = None
    acknowledged_at: Optional[datetime] = None
    created_at: datetime


class PivotAlertStatusUpdate(BaseModel):
    status: Literal["acknowledged", "resolved", "dismissed"]
    operator_id: Optional[str] = Field(None, max_length=255)


class PivotAlertListResponse(BaseModel):
    alerts: list[PivotAlertRead]
    total: int
