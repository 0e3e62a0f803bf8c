"""
Period and timeframe helpers for the dashboard selectors.

Translates the analytics period selector ("1mo", "1y", ...) into the
annualization factor used by the analytics engine, and the chart
timeframe selector ("1D", "1M", ...) into a number of calendar days.
"""

from datetime import UTC, date, datetime
from typing import Optional

TRADING_DAYS_PER_YEAR = 252

# Trading days covered by each short analytics period
_PERIOD_TRADING_DAYS = {
    "1mo": 21,
    "3mo": 63,
    "6mo": 126,
}

_TIMEFRAME_DAYS = {
    "1D": 1,
    "5D": 5,
    "1M": 30,
    "3M": 90,
    "6M": 180,
    "1Y": 365,
    "5Y": 1825,
    "MAX": 3650,
}

DEFAULT_TIMEFRAME_DAYS = 30


def periods_per_year(period: str) -> float:
    """
    Annualization factor for an analytics period.

    Short periods scale the trading year by the number of trading days they
    cover ("1mo" gives 252/21 = 12); "1y", "2y" and anything unrecognized
    give 252.

    Args:
        period: Period selector value

    Returns:
        Return periods per year
    """
    days = _PERIOD_TRADING_DAYS.get(period)
    if days is None:
        return float(TRADING_DAYS_PER_YEAR)
    return TRADING_DAYS_PER_YEAR / days


def timeframe_to_days(timeframe: str) -> int:
    """
    Calendar days covered by a chart timeframe.

    Args:
        timeframe: Timeframe selector value ("1D", "5D", "1M", ..., "MAX")

    Returns:
        Number of days; 30 for an unknown timeframe
    """
    return _TIMEFRAME_DAYS.get(timeframe, DEFAULT_TIMEFRAME_DAYS)


def parse_iso_date(value: str) -> date:
    """
    Parse a "YYYY-MM-DD" bar date.

    Raises:
        ValueError: If the value is not an ISO calendar date
    """
    return date.fromisoformat(value)


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp for signals, alerts and quotes."""
    if now is None:
        now = datetime.now(UTC)
    return now.isoformat()
