"""Default configuration parameters for the analytics core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorParams:
    """Technical indicator periods."""
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9

    bollinger_period: int = 20
    bollinger_std_mult: float = 2.0              # Band width in population sigmas

    stochastic_period: int = 14
    rsi_period: int = 14


@dataclass(frozen=True)
class AnalyticsParams:
    """Portfolio analytics parameters."""
    risk_free_rate: float = 0.04                  # Annual, approximate T-bill yield
    periods_per_year: float = 252.0               # Trading days
    default_period: str = "1y"
    benchmark_symbol: str = "SPY"
    index_base: float = 100.0                     # Comparison curves start here
    downside_threshold: float = 0.0


@dataclass(frozen=True)
class SignalParams:
    """Trading signal thresholds and confidences."""
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0
    rsi_confidence: float = 0.75
    macd_confidence: float = 0.82
    bollinger_upper_confidence: float = 0.68
    bollinger_lower_confidence: float = 0.72


@dataclass(frozen=True)
class RecommendationParams:
    """Portfolio recommendation thresholds (percentages)."""
    max_allocation_pct: float = 40.0
    min_allocation_pct: float = 5.0
    min_positions: int = 5
    review_return_pct: float = -5.0


@dataclass(frozen=True)
class MarketDataParams:
    """Market-data provider parameters."""
    base_url: str = "https://www.alphavantage.co/query"
    api_key_env: str = "ALPHA_VANTAGE_API_KEY"
    timeout_seconds: float = 10.0
    default_days: int = 30
    indicator_days: int = 200


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    analytics: AnalyticsParams
    signals: SignalParams
    recommendations: RecommendationParams
    market_data: MarketDataParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicators=IndicatorParams(),
        analytics=AnalyticsParams(),
        signals=SignalParams(),
        recommendations=RecommendationParams(),
        market_data=MarketDataParams(),
    )
