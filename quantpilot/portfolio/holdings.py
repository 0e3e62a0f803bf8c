"""Portfolio weights and summary figures"""

from dataclasses import dataclass, field
from typing import Sequence

from ..data.models import Position


@dataclass(frozen=True)
class PortfolioSummary:
    total_value: float
    cost_basis: float
    unrealized_pnl: float
    total_return_pct: float
    allocations: dict[str, float] = field(default_factory=dict)    # Symbol to percent of value

    @property
    def num_positions(self) -> int:
        return len(self.allocations)


def total_market_value(positions: Sequence[Position]) -> float:
    return sum(position.market_value for position in positions)


def compute_weights(positions: Sequence[Position]) -> dict[str, float]:
    """
    Fraction of portfolio value held in each symbol

    weight = price * quantity / total value. Repeated symbols are combined.

    Returns:
        Symbol to weight; empty when the portfolio has no value
    """
    total = total_market_value(positions)
    if total == 0:
        return {}

    weights: dict[str, float] = {}
    for position in positions:
        weights[position.symbol] = weights.get(position.symbol, 0.0) + position.market_value / total
    return weights


def summarize_portfolio(positions: Sequence[Position]) -> PortfolioSummary:
    """Totals, unrealized P&L and allocation percentages for the positions."""
    total_value = total_market_value(positions)
    cost_basis = sum(position.cost_basis for position in positions)
    unrealized = total_value - cost_basis
    total_return_pct = unrealized / cost_basis * 100 if cost_basis else 0.0

    allocations = {
        symbol: weight * 100 for symbol, weight in compute_weights(positions).items()
    }

    return PortfolioSummary(
        total_value=total_value,
        cost_basis=cost_basis,
        unrealized_pnl=unrealized,
        total_return_pct=total_return_pct,
        allocations=allocations
    )
