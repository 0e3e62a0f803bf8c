#!/usr/bin/env python3
"""
Basic Usage Example - QuantPilot analytics core

This script runs the analytics core over synthetic price series, so it needs
no API key. It shows how to:
- Compute indicator points and trading signals for one symbol
- Compute portfolio analytics and a benchmark comparison
- Generate recommendations and assistant context for the portfolio

Run: python examples/basic_usage.py
"""

import math
from datetime import date, timedelta

from quantpilot.analytics import AnalyticsEngine
from quantpilot.assistant import build_portfolio_context
from quantpilot.data.models import Position, PriceBar
from quantpilot.indicators import compute_indicators, generate_signals
from quantpilot.logging import configure_logging
from quantpilot.portfolio import compute_weights, generate_recommendations, summarize_portfolio


def create_price_series(start_price: float, drift: float, swing: float, days: int = 120) -> list[PriceBar]:
    """Create a trending, oscillating daily series."""
    bars = []
    start = date(2024, 1, 2)
    for i in range(days):
        close = start_price * (1 + drift) ** i + swing * math.sin(i / 5)
        bars.append(PriceBar(
            date=(start + timedelta(days=i)).isoformat(),
            open=close - 0.5,
            high=close + 1.0,
            low=close - 1.0,
            close=round(close, 2),
            volume=1_000_000 + i * 1000,
        ))
    return bars


def main():
    configure_logging(level="INFO")

    history = {
        "AAPL": create_price_series(180.0, 0.002, 4.0),
        "MSFT": create_price_series(370.0, 0.001, 6.0),
        "KO": create_price_series(60.0, 0.0002, 1.0),
    }
    benchmark = create_price_series(470.0, 0.0008, 5.0)

    print("📈 Indicators for AAPL")
    points = compute_indicators(history["AAPL"])
    last = points[-1]
    print(f"   {last.date}: price={last.price:.2f} rsi={last.rsi:.1f} macd={last.macd:.3f}")
    for signal in generate_signals(last):
        print(f"   {signal.type:8} {signal.indicator}: {signal.message}")

    positions = [
        Position(symbol="AAPL", quantity=40, avg_cost=170.0, price=history["AAPL"][-1].close),
        Position(symbol="MSFT", quantity=10, avg_cost=350.0, price=history["MSFT"][-1].close),
        Position(symbol="KO", quantity=30, avg_cost=62.0, price=history["KO"][-1].close),
    ]
    weights = compute_weights(positions)

    print("\n📊 Portfolio analytics vs SPY")
    engine = AnalyticsEngine()
    result = engine.compute_for_period(history, weights, benchmark, "6mo")
    for name, value in result.to_dict().items():
        if isinstance(value, float):
            print(f"   {name:20} {value:10.3f}")

    comparison = engine.compare(history, weights, benchmark)
    print(f"   outperformance       {comparison.outperformance:10.3f}%")

    print("\n💡 Recommendations")
    summary = summarize_portfolio(positions)
    for card in generate_recommendations(positions, summary.total_return_pct):
        print(f"   [{card.priority}] {card.title}: {card.description}")

    print("\n🤖 Assistant context")
    print(build_portfolio_context(positions))


if __name__ == "__main__":
    main()
