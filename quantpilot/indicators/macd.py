"""MACD (Moving Average Convergence Divergence) calculations"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .moving_averages import ema_series


@dataclass(frozen=True)
class MACDValues:
    """MACD line, signal line and histogram per bar"""
    macd: list[Optional[float]]
    signal: list[Optional[float]]
    histogram: list[Optional[float]]


def calculate_macd(prices: Sequence[float], fast_period: int = 12,
                   slow_period: int = 26, signal_period: int = 9) -> MACDValues:
    """
    Calculate MACD for every bar

    MACD = EMA(fast) - EMA(slow), defined once the slow EMA is.
    Signal = EMA(signal_period) over the MACD history starting at the first
    defined MACD value. Histogram = MACD - Signal.

    Args:
        prices: Closing prices in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal EMA period (default 9)

    Returns:
        MACDValues aligned with prices
    """
    n = len(prices)
    fast = ema_series(prices, fast_period)
    slow = ema_series(prices, slow_period)

    macd: list[Optional[float]] = [None] * n
    for i in range(n):
        if fast[i] is not None and slow[i] is not None:
            macd[i] = fast[i] - slow[i]

    signal: list[Optional[float]] = [None] * n
    histogram: list[Optional[float]] = [None] * n

    first = next((i for i, value in enumerate(macd) if value is not None), None)
    if first is None:
        return MACDValues(macd=macd, signal=signal, histogram=histogram)

    history = macd[first:]
    signal_history = ema_series(history, signal_period)

    for offset, value in enumerate(signal_history):
        if value is None:
            continue
        i = first + offset
        signal[i] = value
        histogram[i] = macd[i] - value

    return MACDValues(macd=macd, signal=signal, histogram=histogram)
