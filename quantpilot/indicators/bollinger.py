"""Bollinger Bands calculations"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class BollingerBand:
    upper: float
    middle: float
    lower: float


def calculate_bollinger(prices: Sequence[float], period: int = 20,
                        std_mult: float = 2.0) -> Optional[BollingerBand]:
    """
    Calculate Bollinger Bands over the last `period` prices

    Middle = SMA(period); sigma is the population standard deviation of the
    same window (exactly 0 for a constant window); bands are
    middle +/- std_mult * sigma.

    Returns:
        BollingerBand or None if insufficient data
    """
    if period <= 0 or len(prices) < period:
        return None

    window = prices[-period:]
    middle = sum(window) / period
    if min(window) == max(window):
        sigma = 0.0
    else:
        sigma = math.sqrt(sum((p - middle) ** 2 for p in window) / period)

    return BollingerBand(
        upper=middle + std_mult * sigma,
        middle=middle,
        lower=middle - std_mult * sigma
    )


def bollinger_series(prices: Sequence[float], period: int = 20,
                     std_mult: float = 2.0) -> list[Optional[BollingerBand]]:
    return [
        calculate_bollinger(prices[i + 1 - period:i + 1], period, std_mult) if i >= period - 1 else None
        for i in range(len(prices))
    ]
