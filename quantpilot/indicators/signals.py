"""Trading signal generation from the latest indicator point"""

from typing import Optional

from ..config.defaults import SignalParams
from ..models.indicators import IndicatorPoint, TradingSignal
from ..utils.time import utc_now_iso


def generate_signals(point: Optional[IndicatorPoint],
                     params: Optional[SignalParams] = None,
                     timestamp: Optional[str] = None) -> list[TradingSignal]:
    """
    Derive RSI, MACD and Bollinger signals from one indicator point

    Only indicator fields that are present are evaluated.

    Args:
        point: Usually the last point of compute_indicators output
        params: Thresholds and confidences
        timestamp: ISO timestamp stamped on every signal (defaults to now)

    Returns:
        Signals in RSI, MACD, Bollinger order; empty if nothing fires
    """
    if point is None:
        return []

    params = params or SignalParams()
    stamp = timestamp or utc_now_iso()
    signals: list[TradingSignal] = []

    if point.rsi is not None:
        if point.rsi < params.rsi_oversold:
            signals.append(TradingSignal(
                type="bullish",
                indicator="RSI Oversold",
                message=f"RSI at {point.rsi:.2f} indicates oversold conditions, potential bounce",
                confidence=params.rsi_confidence,
                timestamp=stamp
            ))
        elif point.rsi > params.rsi_overbought:
            signals.append(TradingSignal(
                type="bearish",
                indicator="RSI Overbought",
                message=f"RSI at {point.rsi:.2f} indicates overbought conditions, potential pullback",
                confidence=params.rsi_confidence,
                timestamp=stamp
            ))

    if point.has_macd_signal():
        if point.histogram > 0 and point.macd > point.signal:
            signals.append(TradingSignal(
                type="bullish",
                indicator="MACD Crossover",
                message="MACD line crossed above the signal line, bullish momentum",
                confidence=params.macd_confidence,
                timestamp=stamp
            ))
        elif point.histogram < 0 and point.macd < point.signal:
            signals.append(TradingSignal(
                type="bearish",
                indicator="MACD Crossover",
                message="MACD line crossed below the signal line, bearish momentum",
                confidence=params.macd_confidence,
                timestamp=stamp
            ))

    if point.has_bollinger():
        if point.price > point.bollinger_upper:
            signals.append(TradingSignal(
                type="warning",
                indicator="Bollinger Bands",
                message="Price above the upper band, potentially overbought",
                confidence=params.bollinger_upper_confidence,
                timestamp=stamp
            ))
        elif point.price < point.bollinger_lower:
            signals.append(TradingSignal(
                type="bullish",
                indicator="Bollinger Bands",
                message="Price below the lower band, potentially oversold",
                confidence=params.bollinger_lower_confidence,
                timestamp=stamp
            ))

    return signals
