"""Portfolio analytics engine for risk and performance statistics"""

from .drawdown import max_drawdown
from .engine import AnalyticsEngine, compare_to_benchmark, compute_analytics
from .ratios import beta_alpha, calmar_ratio, information_ratio, sharpe_ratio, sortino_ratio
from .returns import annualized_return, portfolio_returns, simple_returns, total_return
from .statistics import correlation, covariance, downside_deviation, mean, stddev, tracking_error, variance

__all__ = [
    "AnalyticsEngine",
    "compute_analytics",
    "compare_to_benchmark",
    "simple_returns",
    "portfolio_returns",
    "total_return",
    "annualized_return",
    "mean",
    "stddev",
    "variance",
    "covariance",
    "downside_deviation",
    "correlation",
    "tracking_error",
    "max_drawdown",
    "sharpe_ratio",
    "sortino_ratio",
    "beta_alpha",
    "calmar_ratio",
    "information_ratio",
]
