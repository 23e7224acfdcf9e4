"""Product match scoring — company fit against a product's target profile."""

from leadintel.services.product_match.match_engine import (
    ProductMatch,
    compute_product_match,
    match_company,
    match_level,
)
from leadintel.services.product_match.match_service import get_product, match_companies_for_product

__all__ = [
    "ProductMatch",
    "compute_product_match",
    "get_product",
    "match_companies_for_product",
    "match_company",
    "match_level",
]
