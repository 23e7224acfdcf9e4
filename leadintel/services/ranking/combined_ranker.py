"""Combined ranker — filtered, sorted, paginated lead search over intent and product match.

Two stages:

1. Store: scope and scalar filters (intent level/stage/score, rank, industry,
   employees, website) and the primary sort on scalar columns. Companies
   without an IntentProfile count as score 0, cold, unknown.
2. Memory: product match and combined score, then the min-match-score and
   location filters, the secondary sort on combined_score / match_score,
   and offset/limit.

Every ordering breaks ties on company id ascending so pages are stable.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from leadintel.config import get_settings
from leadintel.models import Company, IntentProfile, Product
from leadintel.services.product_match.match_engine import match_company
from leadintel.services.ranking.priority import (
    combined_score,
    enrichment_highlights,
    priority_rank,
    recommended_actions,
    round_half_up,
)

logger = logging.getLogger(__name__)

SortKey = Literal["intent_score", "match_score", "combined_score", "employees", "created_at"]
SortOrder = Literal["asc", "desc"]

STORE_SORT_KEYS: frozenset[str] = frozenset({"intent_score", "employees", "created_at"})
TOP_INDUSTRIES: int = 5
HOT_LEADS_DEFAULT_LIMIT: int = 20


@dataclass
class LeadSearchCriteria:
    """Filter/sort criteria for search_leads. None means 'no filter'."""

    client_id: int | None = None
    product_id: int | None = None
    intent_levels: list[str] | None = None
    buying_stages: list[str] | None = None
    min_intent_score: int | None = None
    min_match_score: int | None = None
    ranks: list[str] | None = None
    industries: list[str] | None = None
    min_employees: int | None = None
    max_employees: int | None = None
    locations: list[str] | None = None
    has_website: bool | None = None
    sort_by: SortKey = "intent_score"
    sort_order: SortOrder = "desc"
    offset: int = 0
    limit: int | None = None


@dataclass
class RankedLead:
    """One search result."""

    company: Company
    intent_score: int
    intent_level: str
    buying_stage: str
    combined_score: int
    priority_rank: str
    product_match_score: int | None = None
    product_match_level: str | None = None
    highlights: dict[str, Any] | None = None
    recommended_actions: list[str] = field(default_factory=list)
    intent_summary: str | None = None


class ProductNotFoundError(ValueError):
    """Raised when the search names a product that does not exist."""

    pass


def _store_query(db: Session, criteria: LeadSearchCriteria):
    intent_score = func.coalesce(IntentProfile.intent_score, 0)
    intent_lvl = func.coalesce(IntentProfile.intent_level, "cold")
    stage = func.coalesce(IntentProfile.buying_stage, "unknown")

    query = db.query(Company, IntentProfile).outerjoin(
        IntentProfile, IntentProfile.company_id == Company.id
    )
    if criteria.client_id is not None:
        query = query.filter(Company.client_id == criteria.client_id)
    if criteria.intent_levels:
        query = query.filter(intent_lvl.in_(criteria.intent_levels))
    if criteria.buying_stages:
        query = query.filter(stage.in_(criteria.buying_stages))
    if criteria.min_intent_score is not None:
        query = query.filter(intent_score >= criteria.min_intent_score)
    if criteria.ranks:
        query = query.filter(Company.rank.in_(criteria.ranks))
    if criteria.industries:
        query = query.filter(Company.industry.in_(criteria.industries))
    if criteria.min_employees is not None:
        query = query.filter(Company.employees >= criteria.min_employees)
    if criteria.max_employees is not None:
        query = query.filter(Company.employees <= criteria.max_employees)
    if criteria.has_website is True:
        query = query.filter(Company.website.isnot(None), Company.website != "")
    elif criteria.has_website is False:
        query = query.filter(or_(Company.website.is_(None), Company.website == ""))

    sort_by = criteria.sort_by if criteria.sort_by in STORE_SORT_KEYS else "intent_score"
    column = {
        "intent_score": intent_score,
        "employees": Company.employees,
        "created_at": Company.created_at,
    }[sort_by]
    ordered = column.asc() if criteria.sort_order == "asc" else column.desc()
    return query.order_by(ordered.nulls_last(), Company.id.asc())


def _rank_one(company: Company, profile: IntentProfile | None, product: Product | None) -> RankedLead:
    intent_score = profile.intent_score if profile else 0
    level = profile.intent_level if profile else "cold"
    stage = profile.buying_stage if profile else "unknown"

    match_score: int | None = None
    match_lvl: str | None = None
    if product is not None:
        match = match_company(product, company)
        match_score, match_lvl = match.score, match.level

    combined = combined_score(intent_score, match_score)
    return RankedLead(
        company=company,
        intent_score=intent_score,
        intent_level=level,
        buying_stage=stage,
        combined_score=combined,
        priority_rank=priority_rank(combined, level, match_lvl),
        product_match_score=match_score,
        product_match_level=match_lvl,
        highlights=enrichment_highlights(company.enrichment),
        recommended_actions=recommended_actions(level, stage, match_lvl, company.enrichment),
        intent_summary=profile.summary if profile else None,
    )


def summarize(results: list[RankedLead], with_product: bool) -> dict[str, Any]:
    """Aggregate counts, averages and top-5 industries over a result set."""
    by_intent = {"hot": 0, "warm": 0, "cold": 0}
    by_stage = {"awareness": 0, "consideration": 0, "decision": 0, "unknown": 0}
    by_rank = {"S": 0, "A": 0, "B": 0, "C": 0}
    for r in results:
        by_intent[r.intent_level] = by_intent.get(r.intent_level, 0) + 1
        by_stage[r.buying_stage] = by_stage.get(r.buying_stage, 0) + 1
        by_rank[r.priority_rank] += 1

    total = len(results)
    avg_intent = round_half_up(sum(r.intent_score for r in results) / total) if total else 0
    avg_match: int | None = None
    if with_product:
        avg_match = (
            round_half_up(sum(r.product_match_score or 0 for r in results) / total) if total else 0
        )
    industries = Counter(r.company.industry for r in results if r.company.industry)

    return {
        "total": total,
        "by_intent_level": by_intent,
        "by_buying_stage": by_stage,
        "by_priority_rank": by_rank,
        "avg_intent_score": avg_intent,
        "avg_match_score": avg_match,
        "top_industries": [
            {"industry": name, "count": count}
            for name, count in industries.most_common(TOP_INDUSTRIES)
        ],
    }


def search_leads(db: Session, criteria: LeadSearchCriteria) -> dict[str, Any]:
    """Run a combined intent/product search.

    Returns:
        dict with ``results`` (page of RankedLead), ``total`` (filtered count
        before pagination) and ``summary`` (over the full filtered set).

    Raises:
        ProductNotFoundError: When criteria.product_id names no product.
    """
    product: Product | None = None
    if criteria.product_id is not None:
        product = db.query(Product).filter(Product.id == criteria.product_id).first()
        if product is None:
            raise ProductNotFoundError(f"Product {criteria.product_id} not found")
        if criteria.client_id is None:
            criteria = replace(criteria, client_id=product.client_id)

    rows = _store_query(db, criteria).all()
    results = [_rank_one(company, profile, product) for company, profile in rows]

    if criteria.min_match_score is not None and product is not None:
        results = [r for r in results if (r.product_match_score or 0) >= criteria.min_match_score]
    if criteria.locations:
        results = [
            r
            for r in results
            if r.company.location and any(loc in r.company.location for loc in criteria.locations)
        ]

    sign = 1 if criteria.sort_order == "asc" else -1
    if criteria.sort_by == "combined_score":
        results.sort(key=lambda r: (sign * r.combined_score, r.company.id))
    elif criteria.sort_by == "match_score" and product is not None:
        results.sort(key=lambda r: (sign * (r.product_match_score or 0), r.company.id))

    summary = summarize(results, product is not None)
    limit = criteria.limit if criteria.limit is not None else get_settings().search_default_limit
    offset = max(criteria.offset, 0)
    page = results[offset : offset + limit]

    logger.debug("Lead search: matched=%d returned=%d", len(results), len(page))
    return {"results": page, "total": len(results), "summary": summary}


def get_hot_leads(
    db: Session,
    client_id: int | None = None,
    limit: int = HOT_LEADS_DEFAULT_LIMIT,
) -> list[RankedLead]:
    """Hot-intent leads, highest combined score first."""
    criteria = LeadSearchCriteria(
        client_id=client_id,
        intent_levels=["hot"],
        sort_by="combined_score",
        sort_order="desc",
        limit=limit,
    )
    return search_leads(db, criteria)["results"]
