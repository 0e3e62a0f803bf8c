"""Indicator engine for chart-ready technical indicator series"""

from .bollinger import calculate_bollinger
from .calculator import IndicatorCalculator, compute_indicators
from .macd import calculate_macd
from .moving_averages import ema, ema_series, sma
from .rsi import calculate_rsi
from .signals import generate_signals
from .stochastic import calculate_stochastic

__all__ = [
    "IndicatorCalculator",
    "compute_indicators",
    "generate_signals",
    "sma",
    "ema",
    "ema_series",
    "calculate_macd",
    "calculate_bollinger",
    "calculate_stochastic",
    "calculate_rsi",
]
