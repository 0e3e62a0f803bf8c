"""
Price series validation for the provider boundary.

The analytics engines assume a well-formed series and do not revalidate it.
These checks run where data enters the system (the provider client or a
caller that builds series by hand) and reject shapes the engines cannot
handle meaningfully.
"""

import math

from ..errors import InsufficientDataError, MalformedDataError, MissingDataError, TemporalDataError
from ..utils.time import parse_iso_date
from .models import PriceBar


def validate_bar(bar: PriceBar) -> None:
    """
    Validate a single bar's field values.

    Raises:
        MalformedDataError: If a price or volume is invalid
    """
    try:
        parse_iso_date(bar.date)
    except (TypeError, ValueError):
        raise MalformedDataError(
            f"Invalid bar date: {bar.date!r}",
            raw_data=str(bar.date),
            expected_format="YYYY-MM-DD"
        )

    for name in ("open", "high", "low", "close"):
        value = getattr(bar, name)
        if not isinstance(value, (int, float)):
            raise MalformedDataError(f"Invalid {name} type on {bar.date}: {type(value)}")
        if math.isnan(value) or math.isinf(value):
            raise MalformedDataError(f"Invalid {name} value on {bar.date}: {value}")
        if value <= 0:
            raise MalformedDataError(f"Non-positive {name} on {bar.date}: {value}")

    if bar.high < bar.low:
        raise MalformedDataError(f"High price less than low on {bar.date}")

    if not isinstance(bar.volume, int) or bar.volume < 0:
        raise MalformedDataError(f"Invalid volume on {bar.date}: {bar.volume}")


def validate_price_series(bars: list[PriceBar], allow_empty: bool = False,
                          min_length: int = 0) -> None:
    """
    Validate a full price series: field values plus strictly ascending dates.

    Args:
        bars: Series to validate
        allow_empty: Accept an empty series instead of raising
        min_length: Fewest bars a non-empty series must hold

    Raises:
        MissingDataError: If the series is empty and allow_empty is False
        MalformedDataError: If any bar has invalid values
        TemporalDataError: If dates are duplicated or out of order
        InsufficientDataError: If a non-empty series is shorter than min_length
    """
    if not bars:
        if allow_empty:
            return
        raise MissingDataError("Price series is empty", data_type="price_series")

    previous = None
    for bar in bars:
        validate_bar(bar)
        # ISO dates compare correctly as strings
        if previous is not None and bar.date <= previous.date:
            raise TemporalDataError(
                f"Dates not strictly ascending: {previous.date} then {bar.date}",
                date=bar.date,
                previous_date=previous.date
            )
        previous = bar

    if len(bars) < min_length:
        raise InsufficientDataError(
            f"Price series has {len(bars)} bars, need {min_length}",
            required_count=min_length,
            available_count=len(bars)
        )
