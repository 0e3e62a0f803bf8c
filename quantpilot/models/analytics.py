"""Data models for portfolio analytics results"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class AnalyticsResult:
    """
    Risk and performance statistics for a portfolio against a benchmark.

    Percent fields: volatility, downside_deviation (both annualized), alpha,
    total_return, annualized_return, max_drawdown. When sufficient_data is
    False every metric is None and reason explains why.
    """
    sufficient_data: bool
    reason: Optional[str] = None
    num_periods: int = 0
    sharpe_ratio: Optional[float] = None
    sortino_ratio: Optional[float] = None
    max_drawdown: Optional[float] = None
    volatility: Optional[float] = None
    beta: Optional[float] = None
    alpha: Optional[float] = None
    total_return: Optional[float] = None
    annualized_return: Optional[float] = None
    downside_deviation: Optional[float] = None
    calmar_ratio: Optional[float] = None

    @classmethod
    def computed(cls, num_periods: int, **metrics: float) -> "AnalyticsResult":
        """Create a result with all metrics filled in."""
        return cls(sufficient_data=True, num_periods=num_periods, **metrics)

    @classmethod
    def insufficient(cls, reason: str, num_periods: int = 0) -> "AnalyticsResult":
        """Create a cannot-compute result."""
        return cls(sufficient_data=False, reason=reason, num_periods=num_periods)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComparisonPoint:
    """Portfolio and benchmark values indexed to a common base."""
    date: str
    portfolio_indexed: float
    benchmark_indexed: float


@dataclass(frozen=True)
class BenchmarkComparison:
    """
    Portfolio performance relative to a benchmark.

    Percent fields: portfolio_return, benchmark_return, outperformance,
    alpha, tracking_error.
    """
    benchmark_symbol: str
    sufficient_data: bool
    reason: Optional[str] = None
    points: list[ComparisonPoint] = field(default_factory=list)
    portfolio_return: Optional[float] = None
    benchmark_return: Optional[float] = None
    outperformance: Optional[float] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None
    correlation: Optional[float] = None
    tracking_error: Optional[float] = None
    information_ratio: Optional[float] = None

    @classmethod
    def insufficient(cls, benchmark_symbol: str, reason: str) -> "BenchmarkComparison":
        return cls(benchmark_symbol=benchmark_symbol, sufficient_data=False, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
