"""Drawdown calculations"""

from typing import Sequence


def max_drawdown(returns: Sequence[float]) -> float:
    """
    Largest peak-to-trough decline of the compounded wealth curve

    The curve starts at 1.0, which also seeds the running peak.

    Returns:
        Drawdown in percent, <= 0 (0.0 when the curve never falls)
    """
    peak = 1.0
    wealth = 1.0
    worst = 0.0

    for r in returns:
        wealth *= 1 + r
        if wealth > peak:
            peak = wealth
        drawdown = (wealth - peak) / peak
        if drawdown < worst:
            worst = drawdown

    return worst * 100
