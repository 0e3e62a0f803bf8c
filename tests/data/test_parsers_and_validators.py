"""Tests for provider payload parsing and price series validation"""

from datetime import UTC, datetime

import orjson
import pytest

from quantpilot.data.models import PriceBar, Quote
from quantpilot.data.parsers import (
    parse_daily_series,
    parse_global_quote,
    parse_json_payload,
    parse_overview,
)
from quantpilot.data.validators import validate_bar, validate_price_series
from quantpilot.errors import (
    InsufficientDataError,
    MalformedDataError,
    MissingDataError,
    RateLimitedError,
    SymbolNotFoundError,
    TemporalDataError,
    UpstreamFailureError,
)


def daily_payload(days: dict) -> dict:
    return {
        "Meta Data": {"2. Symbol": "AAPL"},
        "Time Series (Daily)": {
            day: {
                "1. open": str(close - 1),
                "2. high": str(close + 2),
                "3. low": str(close - 2),
                "4. close": str(close),
                "5. volume": "1000",
            }
            for day, close in days.items()
        },
    }


class TestParseJsonPayload:
    """Test raw body decoding"""

    def test_object(self):
        assert parse_json_payload(b'{"a": 1}') == {"a": 1}

    def test_invalid_json(self):
        with pytest.raises(UpstreamFailureError):
            parse_json_payload(b"<html>")

    def test_non_object(self):
        with pytest.raises(UpstreamFailureError):
            parse_json_payload(orjson.dumps([1, 2]))


class TestParseDailySeries:
    """Test TIME_SERIES_DAILY parsing"""

    def test_most_recent_days_ascending(self):
        payload = daily_payload({
            "2024-01-05": 105.0,
            "2024-01-02": 102.0,
            "2024-01-04": 104.0,
            "2024-01-03": 103.0,
        })
        bars = parse_daily_series(payload, "AAPL", 3)

        assert [bar.date for bar in bars] == ["2024-01-03", "2024-01-04", "2024-01-05"]
        assert bars[-1] == PriceBar(date="2024-01-05", open=104.0, high=107.0, low=103.0,
                                    close=105.0, volume=1000)

    def test_zero_days(self):
        assert parse_daily_series(daily_payload({"2024-01-02": 1.0}), "AAPL", 0) == []

    def test_rate_limited(self):
        with pytest.raises(RateLimitedError) as exc_info:
            parse_daily_series({"Note": "Thank you for using Alpha Vantage!"}, "AAPL", 30)

        assert exc_info.value.recoverable
        assert "Thank you" in exc_info.value.provider_note

    def test_information_payload_is_rate_limit(self):
        with pytest.raises(RateLimitedError):
            parse_daily_series({"Information": "premium endpoint"}, "AAPL", 30)

    def test_unknown_symbol(self):
        with pytest.raises(SymbolNotFoundError):
            parse_daily_series({"Error Message": "Invalid API call"}, "NOPE", 30)

    def test_missing_series(self):
        with pytest.raises(SymbolNotFoundError):
            parse_daily_series({"Meta Data": {}}, "AAPL", 30)

    def test_malformed_bar(self):
        payload = {"Time Series (Daily)": {"2024-01-02": {"1. open": "abc"}}}
        with pytest.raises(MalformedDataError):
            parse_daily_series(payload, "AAPL", 30)


class TestParseGlobalQuote:
    """Test GLOBAL_QUOTE parsing"""

    def test_quote(self):
        payload = {"Global Quote": {
            "01. symbol": "AAPL",
            "05. price": "190.50",
            "06. volume": "5000000",
            "08. previous close": "188.00",
        }}
        ts = datetime(2024, 1, 2, 16, 0, tzinfo=UTC)
        quote = parse_global_quote(payload, "aapl", timestamp=ts)

        assert quote == Quote(symbol="AAPL", price=190.5, previous_close=188.0,
                              volume=5000000, timestamp=ts.isoformat())
        assert quote.change == pytest.approx(2.5)
        assert quote.change_percent == pytest.approx(2.5 / 188.0 * 100)

    def test_empty_quote(self):
        with pytest.raises(SymbolNotFoundError):
            parse_global_quote({"Global Quote": {}}, "AAPL")

    def test_zero_price(self):
        with pytest.raises(MalformedDataError):
            parse_global_quote({"Global Quote": {"05. price": "0"}}, "AAPL")

    def test_unknown_previous_close(self):
        quote = Quote(symbol="X", price=10.0, previous_close=0.0, volume=0, timestamp="")
        assert quote.change == 0.0
        assert quote.change_percent == 0.0


class TestParseOverview:
    """Test OVERVIEW parsing"""

    def test_overview(self):
        payload = {
            "Symbol": "AAPL",
            "Name": "Apple Inc",
            "Sector": "TECHNOLOGY",
            "PERatio": "29.5",
            "MarketCapitalization": "2900000000000",
            "DividendYield": "None",
            "Beta": "-",
            "52WeekHigh": "199.62",
        }
        fundamentals = parse_overview(payload, "AAPL")

        assert fundamentals.name == "Apple Inc"
        assert fundamentals.sector == "TECHNOLOGY"
        assert fundamentals.industry == "N/A"
        assert fundamentals.pe_ratio == 29.5
        assert fundamentals.market_cap == 2900000000000
        assert fundamentals.dividend_yield is None
        assert fundamentals.beta is None
        assert fundamentals.week_52_high == 199.62
        assert fundamentals.roe is None

    def test_no_symbol(self):
        with pytest.raises(SymbolNotFoundError):
            parse_overview({}, "NOPE")


class TestValidators:
    """Test price series validation"""

    def test_valid_series(self, wavy_bars):
        validate_price_series(wavy_bars)

    def test_empty_series(self):
        with pytest.raises(MissingDataError):
            validate_price_series([])
        validate_price_series([], allow_empty=True)

    def test_descending_dates(self, bars_from_closes):
        bars = bars_from_closes([100.0, 101.0])
        with pytest.raises(TemporalDataError) as exc_info:
            validate_price_series(list(reversed(bars)))

        assert exc_info.value.previous_date == bars[1].date

    def test_duplicate_dates(self, bars_from_closes):
        bar = bars_from_closes([100.0])[0]
        with pytest.raises(TemporalDataError):
            validate_price_series([bar, bar])

    def test_minimum_length(self, wavy_bars):
        with pytest.raises(InsufficientDataError) as exc_info:
            validate_price_series(wavy_bars[:10], min_length=15)

        assert exc_info.value.required_count == 15
        assert exc_info.value.available_count == 10
        validate_price_series(wavy_bars[:15], min_length=15)

    @pytest.mark.parametrize("bar", [
        PriceBar(date="2024-01-02", open=1.0, high=1.0, low=2.0, close=1.5, volume=10),
        PriceBar(date="2024-01-02", open=1.0, high=2.0, low=1.0, close=-1.5, volume=10),
        PriceBar(date="2024-01-02", open=1.0, high=2.0, low=1.0, close=float("nan"), volume=10),
        PriceBar(date="2024-01-02", open=1.0, high=2.0, low=1.0, close=1.5, volume=-1),
        PriceBar(date="02/01/2024", open=1.0, high=2.0, low=1.0, close=1.5, volume=10),
    ])
    def test_malformed_bar(self, bar):
        with pytest.raises(MalformedDataError):
            validate_bar(bar)
