"""Return series construction and compounding"""

from fractions import Fraction
from typing import Mapping, Sequence

from ..data.models import PriceBar
from ..logging.config import get_analytics_logger

logger = get_analytics_logger(__name__)


def simple_returns(closes: Sequence[float]) -> list[float]:
    """
    Period-over-period simple returns

    r[i] = (closes[i + 1] - closes[i]) / closes[i]. Closes must be positive;
    validate_price_series rejects anything else at the provider boundary.

    Returns:
        n - 1 returns for n closes (empty for fewer than 2)
    """
    return [(current - previous) / previous for previous, current in zip(closes, closes[1:])]


def aligned_length(series: Mapping[str, Sequence[PriceBar]]) -> int:
    """Shortest series length; every series is truncated to its leading bars."""
    if not series:
        return 0
    return min(len(bars) for bars in series.values())


def portfolio_returns(holdings: Mapping[str, Sequence[PriceBar]],
                      weights: Mapping[str, float]) -> list[float]:
    """
    Weighted portfolio returns with fixed weights

    Each holding is truncated to the leading m bars where m is the shortest
    series length; the portfolio return at step i is sum(w_s * r_s[i]).
    Weights are used as given (not re-normalized); a symbol without a
    weight contributes nothing.

    The weighted sum is accumulated exactly and rounded once, so weights
    that sum to 1 over identical series reproduce that series' returns
    bit for bit.

    Args:
        holdings: Symbol to price series
        weights: Symbol to fraction of portfolio value

    Returns:
        m - 1 portfolio returns
    """
    m = aligned_length(holdings)
    if m < 2:
        return []

    combined = [Fraction(0)] * (m - 1)
    for symbol, bars in holdings.items():
        weight = weights.get(symbol)
        if weight is None:
            logger.debug("Holding has no weight, using 0", symbol=symbol)
            continue

        exact_weight = Fraction(weight)
        returns = simple_returns([bar.close for bar in bars[:m]])
        for i, r in enumerate(returns):
            combined[i] += exact_weight * Fraction(r)

    return [float(r) for r in combined]


def weighted_value_curve(holdings: Mapping[str, Sequence[PriceBar]],
                         weights: Mapping[str, float]) -> list[float]:
    """Portfolio value proxy sum(close_s[i] * w_s) over the aligned bars."""
    m = aligned_length(holdings)
    values = [0.0] * m
    for symbol, bars in holdings.items():
        weight = weights.get(symbol, 0.0)
        for i in range(m):
            values[i] += bars[i].close * weight
    return values


def index_to_base(values: Sequence[float], base: float = 100.0) -> list[float]:
    """Rescale a value curve so it starts at `base`; all base if it starts at 0."""
    if not values:
        return []
    first = values[0]
    if first == 0:
        return [base] * len(values)
    return [value / first * base for value in values]


def compound(returns: Sequence[float], start: float = 1.0) -> list[float]:
    """Wealth curve from `start`: one value per return."""
    curve = []
    wealth = start
    for r in returns:
        wealth *= 1 + r
        curve.append(wealth)
    return curve


def total_return(returns: Sequence[float]) -> float:
    """prod(1 + r) - 1 as a fraction."""
    growth = 1.0
    for r in returns:
        growth *= 1 + r
    return growth - 1


def annualized_return(total: float, num_periods: int, periods_per_year: float) -> float:
    """
    (1 + total) ^ (1 / years) - 1 where years = num_periods / periods_per_year

    Returns 0.0 when the span is not positive or the total lost everything.
    """
    if periods_per_year <= 0:
        return 0.0

    years = num_periods / periods_per_year
    if years <= 0 or total <= -1:
        return 0.0

    return (1 + total) ** (1 / years) - 1
