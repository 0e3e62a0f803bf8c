"""SMA and EMA calculations"""

from typing import Optional, Sequence


def sma(values: Sequence[float], period: int) -> Optional[float]:
    """
    Simple moving average of the last `period` values

    Args:
        values: Values in chronological order
        period: Window length

    Returns:
        SMA value or None if insufficient data
    """
    if period <= 0 or len(values) < period:
        return None

    window = values[-period:]
    return sum(window) / period


def sma_series(values: Sequence[float], period: int) -> list[Optional[float]]:
    """SMA ending at every index; None before the window fills."""
    return [
        sma(values[:i + 1], period) if i >= period - 1 else None
        for i in range(len(values))
    ]


def ema(values: Sequence[float], period: int) -> Optional[float]:
    """
    Exponential moving average over the whole sequence

    Seeded with the SMA of the first `period` values, then
    EMA = value * k + EMA * (1 - k) with k = 2 / (period + 1).

    Args:
        values: Values in chronological order
        period: EMA period

    Returns:
        EMA at the last value or None if insufficient data
    """
    if period <= 0 or len(values) < period:
        return None

    k = 2 / (period + 1)
    result = sum(values[:period]) / period

    for value in values[period:]:
        result = value * k + result * (1 - k)

    return result


def ema_series(values: Sequence[float], period: int) -> list[Optional[float]]:
    """
    EMA at every index in one forward pass

    Element i equals ema(values[:i + 1], period) exactly: the seed and the
    order of floating-point operations are the same.
    """
    output: list[Optional[float]] = [None] * len(values)
    if period <= 0 or len(values) < period:
        return output

    k = 2 / (period + 1)
    result = sum(values[:period]) / period
    output[period - 1] = result

    for i in range(period, len(values)):
        result = values[i] * k + result * (1 - k)
        output[i] = result

    return output
