"""Alpha Vantage market-data client."""

import os
import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from ..config.defaults import MarketDataParams
from ..data.models import Fundamentals, PriceBar, Quote
from ..data.parsers import (
    parse_daily_series,
    parse_global_quote,
    parse_json_payload,
    parse_overview,
)
from ..data.validators import validate_price_series
from ..errors import ConfigurationError, UpstreamFailureError
from ..logging.config import get_provider_logger

logger = get_provider_logger(__name__)


class AlphaVantageClient:
    """
    Fetches price series, quotes and fundamentals from Alpha Vantage.

    Transport and provider-level failures raise an UpstreamFailureError
    subclass (SymbolNotFoundError, RateLimitedError). Payloads that arrive
    but hold bad bars or quote fields raise a DataQualityError
    (MalformedDataError, TemporalDataError). No retries: callers decide
    whether a rate-limited request is worth repeating.
    """

    def __init__(self, api_key: Optional[str] = None,
                 config: Optional[MarketDataParams] = None):
        self.config = config or MarketDataParams()
        self.api_key = api_key or os.environ.get(self.config.api_key_env)

        if not self.api_key:
            raise ConfigurationError(
                "Alpha Vantage API key not configured",
                source=self.config.api_key_env
            )

        self.logger = logger

    def fetch_price_series(self, symbol: str, days: Optional[int] = None) -> list[PriceBar]:
        """
        Fetch the most recent `days` daily bars, ascending by date.

        Args:
            symbol: Ticker symbol
            days: Number of bars (defaults to MarketDataParams.default_days)
        """
        symbol = _normalize_symbol(symbol)
        days = self.config.default_days if days is None else days

        payload = self._request("TIME_SERIES_DAILY", symbol, outputsize="full")
        bars = parse_daily_series(payload, symbol, days)
        validate_price_series(bars, allow_empty=True)

        self.logger.info("Fetched price series", symbol=symbol, bars=len(bars))
        return bars

    def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the latest quote for a symbol."""
        symbol = _normalize_symbol(symbol)
        payload = self._request("GLOBAL_QUOTE", symbol)
        quote = parse_global_quote(payload, symbol)

        self.logger.info("Fetched quote", symbol=symbol, price=quote.price)
        return quote

    def fetch_fundamentals(self, symbol: str) -> Fundamentals:
        """Fetch the company overview for a symbol."""
        symbol = _normalize_symbol(symbol)
        payload = self._request("OVERVIEW", symbol)
        fundamentals = parse_overview(payload, symbol)

        self.logger.info("Fetched fundamentals", symbol=symbol, name=fundamentals.name)
        return fundamentals

    def _build_url(self, function: str, symbol: str, **params: Any) -> str:
        query = {"function": function, "symbol": symbol, **params, "apikey": self.api_key}
        return f"{self.config.base_url}?{urlencode(query)}"

    def _request(self, function: str, symbol: str, **params: Any) -> dict[str, Any]:
        """Perform a GET request and decode the JSON body."""
        req = Request(
            self._build_url(function, symbol, **params),
            headers={"User-Agent": "quantpilot/0.1", "Accept": "application/json"},
            method="GET"
        )

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                body = response.read()

        except HTTPError as e:
            self.logger.warning(
                "Provider HTTP error",
                endpoint=function,
                symbol=symbol,
                error_code=e.code,
                error_reason=e.reason
            )
            raise UpstreamFailureError(
                f"HTTP {e.code}: {e.reason}", symbol=symbol, endpoint=function
            ) from e

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Provider network error",
                endpoint=function,
                symbol=symbol,
                error=str(e)
            )
            raise UpstreamFailureError(
                f"Network error: {e}", symbol=symbol, endpoint=function
            ) from e

        return parse_json_payload(body)


def _normalize_symbol(symbol: str) -> str:
    if not symbol or not isinstance(symbol, str) or not symbol.strip():
        raise ValueError("Symbol required")
    return symbol.strip().upper()
