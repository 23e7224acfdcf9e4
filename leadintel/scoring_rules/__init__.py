"""Scoring rule sets (industries, cities, news keywords) loaded from YAML."""

from leadintel.scoring_rules.loader import (
    clear_scoring_rules_cache,
    get_funding_amount_pattern,
    get_high_potential_industries,
    get_major_cities,
    get_news_keywords,
    load_scoring_rules,
)
from leadintel.scoring_rules.validator import ScoringRulesValidationError, validate_scoring_rules

__all__ = [
    "ScoringRulesValidationError",
    "clear_scoring_rules_cache",
    "get_funding_amount_pattern",
    "get_high_potential_industries",
    "get_major_cities",
    "get_news_keywords",
    "load_scoring_rules",
    "validate_scoring_rules",
]
