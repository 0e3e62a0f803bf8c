"""
Canonical data models for market data and user holdings.

Immutable structures produced by the market-data provider layer and consumed
by the indicator and analytics engines.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PriceBar:
    """Daily OHLCV bar. Series are ordered ascending by date."""
    date: str           # ISO date, e.g. "2024-03-01"
    open: float
    high: float
    low: float
    close: float
    volume: int


PriceSeries = list[PriceBar]


@dataclass(frozen=True)
class Quote:
    """Latest quote with derived change figures."""
    symbol: str
    price: float
    previous_close: float
    volume: int
    timestamp: str

    @property
    def change(self) -> float:
        """Absolute change versus previous close, 0 when unknown."""
        if self.previous_close <= 0:
            return 0.0
        return self.price - self.previous_close

    @property
    def change_percent(self) -> float:
        """Percent change versus previous close, 0 when unknown."""
        if self.previous_close <= 0:
            return 0.0
        return self.change / self.previous_close * 100


@dataclass(frozen=True)
class Fundamentals:
    """Company overview. Every numeric field is individually nullable."""
    symbol: str
    name: str
    sector: str = "N/A"
    industry: str = "N/A"
    description: str = "N/A"

    # Valuation
    pe_ratio: Optional[float] = None
    ps_ratio: Optional[float] = None
    pb_ratio: Optional[float] = None

    # Profitability
    eps: Optional[float] = None
    roe: Optional[float] = None
    roic: Optional[float] = None
    operating_margin: Optional[float] = None
    profit_margin: Optional[float] = None

    # Financial health
    debt_to_equity: Optional[float] = None
    current_ratio: Optional[float] = None
    quick_ratio: Optional[float] = None

    # Growth and dividend
    revenue_per_share: Optional[float] = None
    dividend_yield: Optional[float] = None
    payout_ratio: Optional[float] = None

    # Other
    market_cap: Optional[int] = None
    book_value: Optional[float] = None
    beta: Optional[float] = None
    week_52_high: Optional[float] = None
    week_52_low: Optional[float] = None

    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Position:
    """A portfolio holding as recorded by the user."""
    symbol: str
    quantity: float
    avg_cost: float
    price: float        # Current market price

    @property
    def market_value(self) -> float:
        return self.price * self.quantity

    @property
    def cost_basis(self) -> float:
        return self.avg_cost * self.quantity

    @property
    def unrealized_pnl(self) -> float:
        return self.market_value - self.cost_basis
