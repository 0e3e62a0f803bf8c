"""Stochastic oscillator (%K) calculations"""

from typing import Optional, Sequence

from ..data.models import PriceBar


def calculate_stochastic(bars: Sequence[PriceBar], period: int = 14) -> Optional[float]:
    """
    Calculate %K for the last bar

    %K = (close - lowest low) / (highest high - lowest low) * 100
    over the last `period` bars.

    Returns:
        %K in [0, 100], or None if insufficient data or a zero range
    """
    if period <= 0 or len(bars) < period:
        return None

    window = bars[-period:]
    lowest = min(bar.low for bar in window)
    highest = max(bar.high for bar in window)

    if highest == lowest:
        return None

    return (window[-1].close - lowest) / (highest - lowest) * 100


def stochastic_series(bars: Sequence[PriceBar], period: int = 14) -> list[Optional[float]]:
    return [
        calculate_stochastic(bars[i + 1 - period:i + 1], period) if i >= period - 1 else None
        for i in range(len(bars))
    ]
