"""Rule-based portfolio recommendations"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Sequence

from ..config.defaults import RecommendationParams
from ..data.models import Position
from .holdings import compute_weights


@dataclass(frozen=True)
class Recommendation:
    type: str           # 'rebalance', 'diversify', 'review' or 'dividend'
    title: str
    description: str
    action: str
    priority: str       # 'high', 'medium' or 'low'

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def generate_recommendations(positions: Sequence[Position],
                             total_return_pct: Optional[float] = None,
                             params: Optional[RecommendationParams] = None,
                             dividend_yields: Optional[Mapping[str, float]] = None) -> list[Recommendation]:
    """
    Build recommendation cards for a portfolio

    Rules, in output order:
    - rebalance: any allocation above max_allocation_pct or below
      min_allocation_pct
    - diversify: fewer than min_positions positions
    - review: total return below review_return_pct
    - dividend: any position with a positive dividend yield

    Args:
        positions: Current holdings
        total_return_pct: Portfolio total return in percent, if known
        params: Thresholds
        dividend_yields: Symbol to dividend yield, if known

    Returns:
        Recommendations; deterministic for the same inputs
    """
    params = params or RecommendationParams()
    recommendations: list[Recommendation] = []

    weights = compute_weights(positions)
    outside = [
        symbol for symbol, weight in weights.items()
        if weight * 100 > params.max_allocation_pct or weight * 100 < params.min_allocation_pct
    ]
    if outside:
        recommendations.append(Recommendation(
            type="rebalance",
            title="Portfolio Rebalancing",
            description=f"{', '.join(outside)} positions are outside optimal allocation ranges",
            action="Review and rebalance to maintain risk profile",
            priority="medium"
        ))

    if len(positions) < params.min_positions:
        recommendations.append(Recommendation(
            type="diversify",
            title="Increase Diversification",
            description=("Current portfolio has limited diversification. "
                         "Consider adding positions across different sectors."),
            action="Add 2-3 positions in uncorrelated assets",
            priority="medium"
        ))

    if total_return_pct is not None and total_return_pct < params.review_return_pct:
        recommendations.append(Recommendation(
            type="review",
            title="Portfolio Review Recommended",
            description="Recent performance is underperforming benchmarks. Review strategy and holdings.",
            action="Analyze underperforming positions",
            priority="high"
        ))

    if dividend_yields:
        payers = [
            position.symbol for position in positions
            if (dividend_yields.get(position.symbol) or 0) > 0
        ]
        if payers:
            recommendations.append(Recommendation(
                type="dividend",
                title="Dividend Reinvestment",
                description=f"{', '.join(payers)} pay dividends. Consider reinvestment strategy.",
                action="Set up dividend reinvestment plan (DRIP)",
                priority="low"
            ))

    return recommendations
