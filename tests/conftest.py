"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from typing import Callable, Sequence

import pytest

from quantpilot.data.models import Position, PriceBar

RSI_REFERENCE_PRICES = [100, 102, 101, 105, 103, 108, 107, 110, 112, 109, 115, 113, 118, 120, 119]


def _bars_from_closes(closes: Sequence[float], start: date = date(2024, 1, 2),
                      spread: float = 1.0, volume: int = 1000) -> list[PriceBar]:
    bars = []
    for i, close in enumerate(closes):
        close = float(close)
        bars.append(PriceBar(
            date=(start + timedelta(days=i)).isoformat(),
            open=close,
            high=close + spread,
            low=close - spread,
            close=close,
            volume=volume + i,
        ))
    return bars


@pytest.fixture
def bars_from_closes() -> Callable[..., list[PriceBar]]:
    """Factory building daily bars (high/low = close +/- spread) from closes."""
    return _bars_from_closes


@pytest.fixture
def rsi_reference_bars() -> list[PriceBar]:
    """Fifteen bars whose RSI at index 14 is 100 - 100 / (1 + 29/10)."""
    return _bars_from_closes(RSI_REFERENCE_PRICES)


@pytest.fixture
def rising_bars() -> list[PriceBar]:
    """Sixty strictly increasing closes."""
    return _bars_from_closes([100 + i * 1.5 for i in range(60)])


@pytest.fixture
def flat_bars() -> list[PriceBar]:
    """Forty identical closes with a zero high/low range."""
    return _bars_from_closes([100.0] * 40, spread=0.0)


@pytest.fixture
def wavy_bars() -> list[PriceBar]:
    """Eighty bars oscillating around an uptrend."""
    closes = [100 + i * 0.5 + (3 if i % 4 < 2 else -3) + (i % 7) * 0.25 for i in range(80)]
    return _bars_from_closes(closes, spread=2.0)


@pytest.fixture
def sample_positions() -> list[Position]:
    """Three-position portfolio worth $10,000."""
    return [
        Position(symbol="AAPL", quantity=30, avg_cost=150.0, price=200.0),   # 6000
        Position(symbol="MSFT", quantity=10, avg_cost=300.0, price=350.0),   # 3500
        Position(symbol="KO", quantity=10, avg_cost=55.0, price=50.0),       # 500
    ]
