"""Portfolio analytics engine coordinating risk and performance metrics"""

import math
from typing import Mapping, Optional, Sequence

from ..config.defaults import AnalyticsParams
from ..data.models import PriceBar
from ..logging.config import get_analytics_logger, log_insufficient_data
from ..models.analytics import AnalyticsResult, BenchmarkComparison, ComparisonPoint
from ..utils.time import periods_per_year as period_to_periods_per_year
from .drawdown import max_drawdown
from .ratios import beta_alpha, calmar_ratio, information_ratio, sortino_ratio, sharpe_ratio
from .returns import (
    aligned_length,
    annualized_return,
    index_to_base,
    portfolio_returns,
    simple_returns,
    total_return,
    weighted_value_curve,
)
from .statistics import correlation, downside_deviation, stddev, tracking_error

logger = get_analytics_logger(__name__)

Holdings = Mapping[str, Sequence[PriceBar]]


def compute_analytics(holdings: Holdings,
                      weights: Mapping[str, float],
                      benchmark: Sequence[PriceBar],
                      risk_free_rate_annual: float = 0.04,
                      periods_per_year: float = 252.0,
                      downside_threshold: float = 0.0) -> AnalyticsResult:
    """
    Compute portfolio risk and performance statistics against a benchmark

    Args:
        holdings: Symbol to price series
        weights: Symbol to fraction of portfolio value
        benchmark: Benchmark price series
        risk_free_rate_annual: Annual risk-free rate as a fraction
        periods_per_year: Return periods per year
        downside_threshold: Per-period threshold for downside deviation

    Returns:
        AnalyticsResult; an insufficient result instead of raising when the
        inputs cannot support the statistics
    """
    if not holdings:
        log_insufficient_data(logger, "compute_analytics", "no holdings")
        return AnalyticsResult.insufficient("no holdings")

    m = aligned_length(holdings)
    if m < 2:
        reason = "fewer than 2 aligned price bars across holdings"
        log_insufficient_data(logger, "compute_analytics", reason, {"aligned_length": m})
        return AnalyticsResult.insufficient(reason)

    if len(benchmark) < 2:
        reason = "fewer than 2 benchmark price bars"
        log_insufficient_data(logger, "compute_analytics", reason, {"benchmark_length": len(benchmark)})
        return AnalyticsResult.insufficient(reason)

    returns = portfolio_returns(holdings, weights)
    benchmark_returns = simple_returns([bar.close for bar in benchmark])
    n = len(returns)
    annualizer = math.sqrt(periods_per_year) if periods_per_year > 0 else 0.0

    drawdown_pct = max_drawdown(returns)
    total = total_return(returns)
    annualized = annualized_return(total, n, periods_per_year)
    regression = beta_alpha(returns, benchmark_returns)

    result = AnalyticsResult.computed(
        num_periods=n,
        sharpe_ratio=sharpe_ratio(returns, risk_free_rate_annual, periods_per_year),
        sortino_ratio=sortino_ratio(returns, risk_free_rate_annual, periods_per_year,
                                    downside_threshold),
        max_drawdown=drawdown_pct,
        volatility=stddev(returns) * annualizer * 100,
        beta=regression.beta,
        alpha=regression.alpha * 100,
        total_return=total * 100,
        annualized_return=annualized * 100,
        downside_deviation=downside_deviation(returns, downside_threshold) * annualizer * 100,
        calmar_ratio=calmar_ratio(annualized, drawdown_pct),
    )

    logger.debug(
        "Portfolio analytics computed",
        holdings=len(holdings),
        num_periods=n,
        benchmark_periods=len(benchmark_returns)
    )
    return result


def compare_to_benchmark(holdings: Holdings,
                         weights: Mapping[str, float],
                         benchmark: Sequence[PriceBar],
                         benchmark_symbol: str = "SPY",
                         index_base: float = 100.0) -> BenchmarkComparison:
    """
    Compare a weighted portfolio against a benchmark over the shared window

    The portfolio value at bar i is sum(close_s[i] * w_s); both value curves
    are indexed to `index_base` at the first aligned bar.

    Args:
        holdings: Symbol to price series
        weights: Symbol to fraction of portfolio value
        benchmark: Benchmark price series
        benchmark_symbol: Label carried on the result
        index_base: Starting value of both indexed curves

    Returns:
        BenchmarkComparison with the indexed curve and relative metrics
    """
    if not holdings:
        log_insufficient_data(logger, "compare_to_benchmark", "no holdings")
        return BenchmarkComparison.insufficient(benchmark_symbol, "no holdings")

    m = min(aligned_length(holdings), len(benchmark))
    if m < 2:
        reason = "fewer than 2 aligned price bars"
        log_insufficient_data(logger, "compare_to_benchmark", reason, {"aligned_length": m})
        return BenchmarkComparison.insufficient(benchmark_symbol, reason)

    aligned = {symbol: bars[:m] for symbol, bars in holdings.items()}
    benchmark = benchmark[:m]

    portfolio_values = weighted_value_curve(aligned, weights)
    if min(portfolio_values) <= 0:
        reason = "portfolio value is not positive"
        log_insufficient_data(logger, "compare_to_benchmark", reason)
        return BenchmarkComparison.insufficient(benchmark_symbol, reason)
    benchmark_values = [bar.close for bar in benchmark]

    portfolio_indexed = index_to_base(portfolio_values, index_base)
    benchmark_indexed = index_to_base(benchmark_values, index_base)

    points = [
        ComparisonPoint(
            date=bar.date,
            portfolio_indexed=portfolio_indexed[i],
            benchmark_indexed=benchmark_indexed[i]
        )
        for i, bar in enumerate(benchmark)
    ]

    p_returns = simple_returns(portfolio_values)
    b_returns = simple_returns(benchmark_values)

    portfolio_total = portfolio_indexed[-1] / index_base - 1
    benchmark_total = benchmark_indexed[-1] / index_base - 1
    regression = beta_alpha(p_returns, b_returns)
    te = tracking_error(p_returns, b_returns)

    logger.debug("Benchmark comparison computed", benchmark=benchmark_symbol, num_points=m)

    return BenchmarkComparison(
        benchmark_symbol=benchmark_symbol,
        sufficient_data=True,
        points=points,
        portfolio_return=portfolio_total * 100,
        benchmark_return=benchmark_total * 100,
        outperformance=(portfolio_total - benchmark_total) * 100,
        alpha=regression.alpha * 100,
        beta=regression.beta,
        correlation=correlation(p_returns, b_returns),
        tracking_error=te * 100,
        information_ratio=information_ratio(portfolio_total, benchmark_total, te),
    )


class AnalyticsEngine:
    """
    Portfolio analytics with configured defaults.

    Wraps compute_analytics and compare_to_benchmark so callers only pass
    series and weights; rates, annualization and the benchmark label come
    from AnalyticsParams unless overridden per call.
    """

    def __init__(self, config: Optional[AnalyticsParams] = None):
        self.config = config or AnalyticsParams()

    def compute(self, holdings: Holdings, weights: Mapping[str, float],
                benchmark: Sequence[PriceBar],
                risk_free_rate: Optional[float] = None,
                periods_per_year: Optional[float] = None) -> AnalyticsResult:
        return compute_analytics(
            holdings,
            weights,
            benchmark,
            risk_free_rate_annual=self.config.risk_free_rate if risk_free_rate is None else risk_free_rate,
            periods_per_year=self.config.periods_per_year if periods_per_year is None else periods_per_year,
            downside_threshold=self.config.downside_threshold
        )

    def compute_for_period(self, holdings: Holdings, weights: Mapping[str, float],
                           benchmark: Sequence[PriceBar],
                           period: Optional[str] = None) -> AnalyticsResult:
        """Compute analytics annualized for a dashboard period ("1mo", "1y", ...)."""
        period = period or self.config.default_period
        return self.compute(holdings, weights, benchmark,
                            periods_per_year=period_to_periods_per_year(period))

    def compare(self, holdings: Holdings, weights: Mapping[str, float],
                benchmark: Sequence[PriceBar],
                benchmark_symbol: Optional[str] = None) -> BenchmarkComparison:
        return compare_to_benchmark(
            holdings,
            weights,
            benchmark,
            benchmark_symbol=benchmark_symbol or self.config.benchmark_symbol,
            index_base=self.config.index_base
        )
