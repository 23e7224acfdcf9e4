"""Product match service — score a client's companies against one of its products."""

from __future__ import annotations

from collections import Counter

from sqlalchemy.orm import Session

from leadintel.models import Company, Product
from leadintel.services.product_match.match_engine import ProductMatch, match_company
from leadintel.services.ranking.priority import round_half_up

TOP_INDUSTRIES: int = 5


def get_product(db: Session, product_id: int) -> Product | None:
    return db.query(Product).filter(Product.id == product_id).first()


def match_companies_for_product(
    db: Session,
    product_id: int,
    *,
    min_score: int = 0,
) -> dict | None:
    """Score every company owned by the product's client.

    Returns None if the product does not exist. Otherwise a dict with
    ``matches`` (list of (Company, ProductMatch), best first, company id
    breaking ties) and ``summary`` (total, by_level, top_industries, avg_score).
    """
    product = get_product(db, product_id)
    if product is None:
        return None

    companies = (
        db.query(Company)
        .filter(Company.client_id == product.client_id)
        .order_by(Company.id)
        .all()
    )
    scored: list[tuple[Company, ProductMatch]] = []
    for company in companies:
        match = match_company(product, company)
        if match.score >= min_score:
            scored.append((company, match))
    scored.sort(key=lambda pair: (-pair[1].score, pair[0].id))

    by_level = {"excellent": 0, "good": 0, "fair": 0, "low": 0}
    for _company, match in scored:
        by_level[match.level] += 1
    industries = Counter(c.industry for c, _m in scored if c.industry)
    avg = round_half_up(sum(m.score for _c, m in scored) / len(scored)) if scored else 0

    return {
        "product": product,
        "matches": scored,
        "summary": {
            "total": len(scored),
            "by_level": by_level,
            "top_industries": [
                {"industry": name, "count": count}
                for name, count in industries.most_common(TOP_INDUSTRIES)
            ],
            "avg_score": avg,
        },
    }
