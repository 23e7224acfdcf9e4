"""Fit scoring — static company attributes → S/A/B/C tier."""

from leadintel.services.fit.fit_constants import fit_rank
from leadintel.services.fit.fit_engine import FitScoreResult, compute_fit_score, parse_amount
from leadintel.services.fit.fit_writer import (
    apply_fit_score,
    rescore_companies,
    score_and_store_company,
    score_company,
)

__all__ = [
    "FitScoreResult",
    "apply_fit_score",
    "compute_fit_score",
    "fit_rank",
    "parse_amount",
    "rescore_companies",
    "score_and_store_company",
    "score_company",
]
