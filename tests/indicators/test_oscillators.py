"""Tests for RSI, Stochastic %K and Bollinger Bands"""

import math

import pytest

from quantpilot.indicators.bollinger import bollinger_series, calculate_bollinger
from quantpilot.indicators.rsi import calculate_rsi, rsi_series
from quantpilot.indicators.stochastic import calculate_stochastic, stochastic_series


class TestRSI:
    """Test RSI calculation"""

    def test_rsi_reference_value(self, rsi_reference_bars):
        """Gains sum to 29 and losses to 10 over the 14 changes"""
        closes = [bar.close for bar in rsi_reference_bars]
        assert calculate_rsi(closes) == pytest.approx(100 - 100 / (1 + 29 / 10))
        assert calculate_rsi(closes) == pytest.approx(74.35897435897436)

    def test_rsi_needs_period_plus_one_prices(self, rsi_reference_bars):
        closes = [bar.close for bar in rsi_reference_bars]
        assert calculate_rsi(closes[:14]) is None

    def test_rsi_no_losses_is_100(self):
        assert calculate_rsi([float(p) for p in range(100, 120)]) == 100.0

    def test_rsi_flat_prices_is_100(self):
        assert calculate_rsi([50.0] * 20) == 100.0

    def test_rsi_no_gains_is_0(self):
        assert calculate_rsi([float(p) for p in range(120, 100, -1)]) == 0.0

    def test_rsi_series_boundary(self, wavy_bars):
        """Defined from index 14 and always within [0, 100]"""
        series = rsi_series([bar.close for bar in wavy_bars])

        assert all(v is None for v in series[:14])
        for value in series[14:]:
            assert value is not None
            assert 0.0 <= value <= 100.0

    def test_rsi_uses_only_recent_changes(self, rsi_reference_bars):
        """Prepending history does not change the last value"""
        closes = [bar.close for bar in rsi_reference_bars]
        longer = [500.0, 10.0, 300.0] + closes
        assert calculate_rsi(longer) == calculate_rsi(closes)


class TestStochastic:
    """Test Stochastic %K calculation"""

    def test_stochastic_value(self, rising_bars):
        """Window of 14 rising bars with high/low = close +/- 1"""
        value = calculate_stochastic(rising_bars[:14])
        # lowest low 99, highest high 120.5, close 119.5
        assert value == pytest.approx((119.5 - 99.0) / (120.5 - 99.0) * 100)

    def test_stochastic_zero_range_is_none(self, flat_bars):
        assert calculate_stochastic(flat_bars) is None

    def test_stochastic_series_boundary(self, wavy_bars):
        series = stochastic_series(wavy_bars)

        assert all(v is None for v in series[:13])
        for value in series[13:]:
            assert value is not None
            assert 0.0 <= value <= 100.0

    def test_stochastic_insufficient_data(self, rising_bars):
        assert calculate_stochastic(rising_bars[:13]) is None


class TestBollinger:
    """Test Bollinger Bands calculation"""

    def test_bollinger_population_sigma(self):
        """1..20 has mean 10.5 and population variance 33.25"""
        band = calculate_bollinger([float(v) for v in range(1, 21)])

        assert band.middle == pytest.approx(10.5)
        assert band.upper == pytest.approx(10.5 + 2 * math.sqrt(33.25))
        assert band.lower == pytest.approx(10.5 - 2 * math.sqrt(33.25))

    def test_bollinger_flat_prices_collapse(self):
        band = calculate_bollinger([100.0] * 20)
        assert band.upper == band.middle == band.lower == 100.0

    def test_bollinger_non_integral_flat_prices_collapse(self):
        band = calculate_bollinger([0.1] * 25)
        assert band.upper == band.middle == band.lower

    def test_bollinger_series_boundary(self, wavy_bars):
        series = bollinger_series([bar.close for bar in wavy_bars])

        assert all(v is None for v in series[:19])
        for band in series[19:]:
            assert band is not None
            assert band.lower <= band.middle <= band.upper

    def test_bollinger_custom_multiplier(self):
        prices = [float(v) for v in range(1, 21)]
        narrow = calculate_bollinger(prices, std_mult=1.0)
        wide = calculate_bollinger(prices, std_mult=3.0)

        assert narrow.upper - narrow.middle == pytest.approx((wide.upper - wide.middle) / 3)
