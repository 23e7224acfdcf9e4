"""Product match schemas for GET /api/products/{id}/matches."""

from __future__ import annotations

from pydantic import BaseModel, Field

from leadintel.schemas.company import CompanyRead
from leadintel.schemas.search import IndustryCount


class MatchReason(BaseModel):
    category: str
    reason: str
    score: int


class ProductMatchRead(BaseModel):
    company: CompanyRead
    score: int
    level: str
    reasons: list[MatchReason] = Field(default_factory=list)
    recommended_approach: str
    talking_points: list[str] = Field(default_factory=list)
    potential_objections: list[str] = Field(default_factory=list)


class ProductMatchSummary(BaseModel):
    total: int
    by_level: dict[str, int]
    top_industries: list[IndustryCount] = Field(default_factory=list)
    avg_score: int


class ProductMatchesResponse(BaseModel):
    product_id: int
    matches: list[ProductMatchRead]
    summary: ProductMatchSummary
