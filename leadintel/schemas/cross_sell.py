"""Cross-sell recommendation schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CrossSellRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    source_project_id: int
    target_project_id: int
    company_id: int
    match_score: int
    match_reasons: list[str] = Field(default_factory=list)
    original_rejection_category: Optional[str] = None
    original_rejection_detail: Optional[str] = None
    status: str
    suggested_at: datetime
    actioned_at: Optional[datetime] = None


class CrossSellStatusUpdate(BaseModel):
    status: Literal["accepted", "contacted", "converted", "dismissed"]


class CrossSellListResponse(BaseModel):
    recommendations: list[CrossSellRead]
    total: int
