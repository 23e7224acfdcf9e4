"""Combined ranking — intent + product match → priority tier and lead search."""

from leadintel.services.ranking.combined_ranker import (
    LeadSearchCriteria,
    ProductNotFoundError,
    RankedLead,
    get_hot_leads,
    search_leads,
)
from leadintel.services.ranking.priority import (
    combined_score,
    priority_rank,
    recommended_actions,
    round_half_up,
)

__all__ = [
    "LeadSearchCriteria",
    "ProductNotFoundError",
    "RankedLead",
    "combined_score",
    "get_hot_leads",
    "priority_rank",
    "recommended_actions",
    "round_half_up",
    "search_leads",
]
