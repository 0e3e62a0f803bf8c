"""
Alpha Vantage payload parsers.

Converts raw TIME_SERIES_DAILY, GLOBAL_QUOTE and OVERVIEW responses into
canonical PriceBar, Quote and Fundamentals objects. Provider error payloads
are mapped onto the upstream failure hierarchy here so the client stays thin.
"""

from datetime import UTC, datetime
from typing import Any, Optional

import orjson

from ..errors import (
    MalformedDataError,
    RateLimitedError,
    SymbolNotFoundError,
    UpstreamFailureError,
)
from .models import Fundamentals, PriceBar, Quote

TIME_SERIES_KEY = "Time Series (Daily)"
GLOBAL_QUOTE_KEY = "Global Quote"

# Overview field -> (Fundamentals attribute, converter)
_OVERVIEW_FIELDS = {
    "PERatio": ("pe_ratio", float),
    "PriceToSalesRatioTTM": ("ps_ratio", float),
    "PriceToBookRatio": ("pb_ratio", float),
    "EPS": ("eps", float),
    "ReturnOnEquityTTM": ("roe", float),
    "ReturnOnCapitalEmployedTTM": ("roic", float),
    "OperatingMarginTTM": ("operating_margin", float),
    "ProfitMargin": ("profit_margin", float),
    "DebtToEquity": ("debt_to_equity", float),
    "CurrentRatio": ("current_ratio", float),
    "QuickRatio": ("quick_ratio", float),
    "RevenuePerShareTTM": ("revenue_per_share", float),
    "DividendYield": ("dividend_yield", float),
    "PayoutRatio": ("payout_ratio", float),
    "MarketCapitalization": ("market_cap", int),
    "BookValue": ("book_value", float),
    "Beta": ("beta", float),
    "52WeekHigh": ("week_52_high", float),
    "52WeekLow": ("week_52_low", float),
}


def parse_json_payload(raw_data: bytes | str) -> dict[str, Any]:
    """
    Parse a raw JSON response body into a dictionary.

    Raises:
        UpstreamFailureError: If the body is not a JSON object
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise UpstreamFailureError(f"Invalid JSON from provider: {e}") from e

    if not isinstance(payload, dict):
        raise UpstreamFailureError(
            f"Expected JSON object from provider, got {type(payload).__name__}"
        )

    return payload


def check_provider_errors(payload: dict[str, Any], symbol: str) -> None:
    """
    Raise the matching upstream error for Alpha Vantage error payloads.

    Alpha Vantage answers HTTP 200 for quota and lookup failures and puts the
    reason in a "Note", "Information" or "Error Message" field.
    """
    for key in ("Note", "Information"):
        if key in payload:
            raise RateLimitedError(
                f"Provider rate limit reached while fetching {symbol}",
                provider_note=str(payload[key]),
                symbol=symbol
            )

    if "Error Message" in payload:
        raise SymbolNotFoundError(
            f"Symbol not found: {symbol}",
            symbol=symbol,
            context={"provider_message": payload["Error Message"]}
        )


def parse_daily_series(payload: dict[str, Any], symbol: str, days: int) -> list[PriceBar]:
    """
    Parse a TIME_SERIES_DAILY payload into the most recent `days` bars.

    Returns:
        Bars ascending by date

    Raises:
        RateLimitedError, SymbolNotFoundError: For provider error payloads
        MalformedDataError: If a bar's fields cannot be converted
    """
    check_provider_errors(payload, symbol)

    series = payload.get(TIME_SERIES_KEY)
    if not series:
        raise SymbolNotFoundError(
            f"Symbol not found or no data available: {symbol}", symbol=symbol
        )

    if days <= 0:
        return []

    recent_dates = sorted(series.keys(), reverse=True)[:days]

    bars = []
    for bar_date in sorted(recent_dates):
        fields = series[bar_date]
        try:
            bars.append(PriceBar(
                date=bar_date,
                open=float(fields["1. open"]),
                high=float(fields["2. high"]),
                low=float(fields["3. low"]),
                close=float(fields["4. close"]),
                volume=int(float(fields["5. volume"])),
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedDataError(
                f"Invalid daily bar for {symbol} on {bar_date}: {e}",
                raw_data=str(fields)[:200],
                expected_format=TIME_SERIES_KEY
            ) from e

    return bars


def parse_global_quote(
    payload: dict[str, Any],
    symbol: str,
    timestamp: Optional[datetime] = None
) -> Quote:
    """
    Parse a GLOBAL_QUOTE payload.

    Raises:
        RateLimitedError, SymbolNotFoundError: For provider error payloads
        MalformedDataError: If the price is missing or zero
    """
    check_provider_errors(payload, symbol)

    quote = payload.get(GLOBAL_QUOTE_KEY)
    if not quote:
        raise SymbolNotFoundError(
            f"Symbol not found or API limit reached: {symbol}", symbol=symbol
        )

    price_str = quote.get("05. price")
    if not price_str or price_str == "0":
        raise MalformedDataError(f"Invalid price data received for {symbol}",
                                 raw_data=str(price_str))

    try:
        price = float(price_str)
        previous_close = float(quote.get("08. previous close") or 0)
        volume = int(float(quote.get("06. volume") or 0))
    except ValueError as e:
        raise MalformedDataError(f"Invalid quote fields for {symbol}: {e}") from e

    ts = timestamp or datetime.now(UTC)

    return Quote(
        symbol=symbol.upper(),
        price=price,
        previous_close=previous_close,
        volume=volume,
        timestamp=ts.isoformat(),
    )


def _optional_number(raw: Any, converter) -> Optional[float]:
    """Convert an overview field, treating blanks and "None" as missing."""
    if raw in (None, "", "None", "-"):
        return None
    try:
        return converter(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_overview(payload: dict[str, Any], symbol: str) -> Fundamentals:
    """
    Parse an OVERVIEW payload into Fundamentals.

    Raises:
        RateLimitedError: For quota payloads
        SymbolNotFoundError: If the payload carries no "Symbol"
    """
    check_provider_errors(payload, symbol)

    if not payload.get("Symbol"):
        raise SymbolNotFoundError(f"Symbol not found: {symbol}", symbol=symbol)

    numeric = {
        attr: _optional_number(payload.get(key), converter)
        for key, (attr, converter) in _OVERVIEW_FIELDS.items()
    }

    return Fundamentals(
        symbol=payload["Symbol"],
        name=payload.get("Name") or symbol,
        sector=payload.get("Sector") or "N/A",
        industry=payload.get("Industry") or "N/A",
        description=payload.get("Description") or "N/A",
        **numeric,
    )
