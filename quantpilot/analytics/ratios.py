"""Risk-adjusted performance ratios"""

import math
from dataclasses import dataclass
from typing import Sequence

from .statistics import covariance, downside_deviation, mean, stddev, variance


@dataclass(frozen=True)
class BetaAlpha:
    beta: float
    alpha: float            # Per-period fraction


def sharpe_ratio(returns: Sequence[float], risk_free_rate: float,
                 periods_per_year: float) -> float:
    """
    Annualized Sharpe ratio

    (mean - rf / ppy) / stddev * sqrt(ppy); 0.0 when stddev is 0.

    Args:
        returns: Per-period returns
        risk_free_rate: Annual risk-free rate as a fraction
        periods_per_year: Return periods per year
    """
    deviation = stddev(returns)
    if deviation == 0 or periods_per_year <= 0:
        return 0.0

    excess = mean(returns) - risk_free_rate / periods_per_year
    return excess / deviation * math.sqrt(periods_per_year)


def sortino_ratio(returns: Sequence[float], risk_free_rate: float,
                  periods_per_year: float, threshold: float = 0.0) -> float:
    """Sharpe with downside deviation in the denominator; 0.0 when it is 0."""
    downside = downside_deviation(returns, threshold)
    if downside == 0 or periods_per_year <= 0:
        return 0.0

    excess = mean(returns) - risk_free_rate / periods_per_year
    return excess / downside * math.sqrt(periods_per_year)


def beta_alpha(portfolio: Sequence[float], benchmark: Sequence[float]) -> BetaAlpha:
    """
    Beta and alpha over the trailing common window

    Both series are cut to their last min(len) values. A flat benchmark
    gives beta 1.0.
    """
    n = min(len(portfolio), len(benchmark))
    if n == 0:
        return BetaAlpha(beta=1.0, alpha=0.0)

    p = portfolio[-n:]
    b = benchmark[-n:]

    benchmark_variance = variance(b)
    beta = covariance(p, b) / benchmark_variance if benchmark_variance != 0 else 1.0
    alpha = mean(p) - beta * mean(b)
    return BetaAlpha(beta=beta, alpha=alpha)


def calmar_ratio(annualized_return: float, max_drawdown_pct: float) -> float:
    """Fractional annualized return over |max drawdown percent|; 0.0 without a drawdown."""
    if max_drawdown_pct == 0:
        return 0.0
    return annualized_return / abs(max_drawdown_pct)


def information_ratio(portfolio_total: float, benchmark_total: float,
                      tracking_error: float) -> float:
    """Active return per unit of tracking error; 0.0 when tracking error is 0."""
    if tracking_error == 0:
        return 0.0
    return (portfolio_total - benchmark_total) / tracking_error
