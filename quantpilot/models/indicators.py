"""Data models for indicator output and trading signals"""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class IndicatorPoint:
    """
    Indicator values for one bar.

    Optional fields stay None until the indicator's lookback is met so that
    charting and signal logic never mistake absence for a real reading.
    """
    date: str
    price: float
    volume: int
    macd: Optional[float] = None
    signal: Optional[float] = None
    histogram: Optional[float] = None
    bollinger_upper: Optional[float] = None
    bollinger_middle: Optional[float] = None
    bollinger_lower: Optional[float] = None
    stochastic: Optional[float] = None
    rsi: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Chart row keyed by field name."""
        return asdict(self)

    def has_macd_signal(self) -> bool:
        return self.macd is not None and self.signal is not None and self.histogram is not None

    def has_bollinger(self) -> bool:
        return self.bollinger_upper is not None and self.bollinger_lower is not None


@dataclass(frozen=True)
class TradingSignal:
    """A technical signal derived from the latest indicator point"""
    type: str           # 'bullish', 'bearish' or 'warning'
    indicator: str
    message: str
    confidence: float
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
