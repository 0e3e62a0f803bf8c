"""RSI (Relative Strength Index) calculations"""

from typing import Optional, Sequence


def calculate_rsi(prices: Sequence[float], period: int = 14) -> Optional[float]:
    """
    Calculate RSI for the last price

    Uses the `period` most recent price changes. Average gain and loss are
    simple means where the opposite-direction changes count as zero.
    RSI = 100 - 100 / (1 + avg_gain / avg_loss), and 100 when there are no
    losses.

    Args:
        prices: Closing prices in chronological order
        period: Number of price changes (default 14)

    Returns:
        RSI value or None if fewer than period + 1 prices
    """
    if period <= 0 or len(prices) < period + 1:
        return None

    window = prices[-(period + 1):]
    gains = 0.0
    losses = 0.0

    for previous, current in zip(window, window[1:]):
        change = current - previous
        if change > 0:
            gains += change
        elif change < 0:
            losses -= change

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def rsi_series(prices: Sequence[float], period: int = 14) -> list[Optional[float]]:
    return [
        calculate_rsi(prices[i - period:i + 1], period) if i >= period else None
        for i in range(len(prices))
    ]
