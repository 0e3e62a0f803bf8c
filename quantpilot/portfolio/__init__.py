"""Portfolio helpers: weights, summaries, recommendations and price alerts"""

from .alerts import AlertBook, PriceAlert, evaluate_alerts
from .holdings import PortfolioSummary, compute_weights, summarize_portfolio
from .recommendations import Recommendation, generate_recommendations

__all__ = [
    "compute_weights",
    "summarize_portfolio",
    "PortfolioSummary",
    "generate_recommendations",
    "Recommendation",
    "PriceAlert",
    "evaluate_alerts",
    "AlertBook",
]
