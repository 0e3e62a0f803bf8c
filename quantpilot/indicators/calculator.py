"""Indicator engine coordinating all per-bar indicator calculations"""

from typing import Optional, Sequence

from ..config.defaults import IndicatorParams
from ..data.models import PriceBar
from ..logging.config import get_analytics_logger
from ..models.indicators import IndicatorPoint
from .bollinger import bollinger_series
from .macd import calculate_macd
from .rsi import rsi_series
from .stochastic import stochastic_series

logger = get_analytics_logger(__name__)


class IndicatorCalculator:
    """
    Computes MACD, Bollinger Bands, Stochastic %K and RSI for every bar.

    Stateless: the same bars always produce the same points, and the output
    has one point per input bar.
    """

    def __init__(self, config: Optional[IndicatorParams] = None):
        self.config = config or IndicatorParams()

    def compute(self, bars: Sequence[PriceBar]) -> list[IndicatorPoint]:
        """
        Compute indicator points for a chronologically ordered price series

        Args:
            bars: Price bars ascending by date

        Returns:
            One IndicatorPoint per bar; indicator fields are None until
            their lookback is met
        """
        if not bars:
            return []

        cfg = self.config
        prices = [bar.close for bar in bars]

        macd = calculate_macd(
            prices,
            fast_period=cfg.macd_fast_period,
            slow_period=cfg.macd_slow_period,
            signal_period=cfg.macd_signal_period
        )
        bands = bollinger_series(prices, cfg.bollinger_period, cfg.bollinger_std_mult)
        stochastic = stochastic_series(bars, cfg.stochastic_period)
        rsi = rsi_series(prices, cfg.rsi_period)

        points = []
        for i, bar in enumerate(bars):
            band = bands[i]
            points.append(IndicatorPoint(
                date=bar.date,
                price=bar.close,
                volume=bar.volume,
                macd=macd.macd[i],
                signal=macd.signal[i],
                histogram=macd.histogram[i],
                bollinger_upper=band.upper if band else None,
                bollinger_middle=band.middle if band else None,
                bollinger_lower=band.lower if band else None,
                stochastic=stochastic[i],
                rsi=rsi[i]
            ))

        logger.debug("Indicators computed", bars=len(bars), first_date=bars[0].date,
                     last_date=bars[-1].date)
        return points

    def get_warmup_period(self) -> int:
        """Bars needed before every indicator field is populated."""
        cfg = self.config
        return max(
            cfg.macd_slow_period + cfg.macd_signal_period - 1,
            cfg.bollinger_period,
            cfg.stochastic_period,
            cfg.rsi_period + 1
        )


def compute_indicators(bars: Sequence[PriceBar],
                       config: Optional[IndicatorParams] = None) -> list[IndicatorPoint]:
    """Compute indicator points with default (or given) periods."""
    return IndicatorCalculator(config).compute(bars)
