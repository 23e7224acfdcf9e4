"""Cross-sell recommendation — rejected leads re-targeted at other campaigns."""

from leadintel.services.cross_sell.cross_sell_recommender import (
    CrossSellStatusError,
    generate_cross_sell_recommendations,
    list_cross_sell_for_target,
    rejected_leads,
    run_cross_sell,
    score_cross_sell,
    update_cross_sell_status,
)

__all__ = [
    "CrossSellStatusError",
    "generate_cross_sell_recommendations",
    "list_cross_sell_for_target",
    "rejected_leads",
    "run_cross_sell",
    "score_cross_sell",
    "update_cross_sell_status",
]
