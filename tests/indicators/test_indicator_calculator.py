"""Tests for the indicator engine"""

import pytest

from quantpilot.config.defaults import IndicatorParams
from quantpilot.indicators import IndicatorCalculator, compute_indicators


class TestComputeIndicators:
    """Test compute_indicators end to end"""

    def test_empty_series(self):
        assert compute_indicators([]) == []

    def test_length_preserved_and_bar_fields_copied(self, wavy_bars):
        points = compute_indicators(wavy_bars)

        assert len(points) == len(wavy_bars)
        for point, bar in zip(points, wavy_bars):
            assert point.date == bar.date
            assert point.price == bar.close
            assert point.volume == bar.volume

    def test_rsi_null_below_fifteen_bars(self, rsi_reference_bars):
        """Every RSI is None with only 14 bars"""
        points = compute_indicators(rsi_reference_bars[:14])
        assert all(point.rsi is None for point in points)

    def test_rsi_reference_point(self, rsi_reference_bars):
        points = compute_indicators(rsi_reference_bars)

        assert points[13].rsi is None
        assert points[14].rsi == pytest.approx(74.35897435897436)

    def test_rising_prices(self, rising_bars):
        points = compute_indicators(rising_bars)
        assert all(point.rsi == 100.0 for point in points[14:])

    def test_flat_prices(self, flat_bars):
        """Bands collapse, RSI is 100 and %K is undefined"""
        points = compute_indicators(flat_bars)

        for point in points[19:]:
            assert point.bollinger_upper == point.bollinger_middle == point.bollinger_lower
        assert all(point.rsi == 100.0 for point in points[14:])
        assert all(point.stochastic is None for point in points)

    def test_flat_fractional_prices_collapse_bands(self, bars_from_closes):
        points = compute_indicators(bars_from_closes([0.1] * 25, spread=0.0))

        defined = [point for point in points if point.has_bollinger()]
        assert len(defined) == 6
        for point in defined:
            assert point.bollinger_upper == point.bollinger_middle == point.bollinger_lower

    def test_short_series_has_no_indicators(self, bars_from_closes):
        points = compute_indicators(bars_from_closes([100.0, 101.0, 102.0]))

        for point in points:
            assert point.macd is None
            assert point.signal is None
            assert point.histogram is None
            assert point.bollinger_middle is None
            assert point.stochastic is None
            assert point.rsi is None

    def test_deterministic(self, wavy_bars):
        assert compute_indicators(wavy_bars) == compute_indicators(wavy_bars)

    def test_to_dict_chart_row(self, wavy_bars):
        row = compute_indicators(wavy_bars)[0].to_dict()

        assert row["date"] == wavy_bars[0].date
        assert row["price"] == wavy_bars[0].close
        assert row["macd"] is None
        assert set(row) == {
            "date", "price", "volume", "macd", "signal", "histogram",
            "bollinger_upper", "bollinger_middle", "bollinger_lower",
            "stochastic", "rsi",
        }


class TestIndicatorCalculator:
    """Test IndicatorCalculator configuration"""

    def test_default_config(self):
        calc = IndicatorCalculator()
        assert calc.config == IndicatorParams()

    def test_warmup_period(self, wavy_bars):
        """All fields are populated from the warmup index on"""
        calc = IndicatorCalculator()
        warmup = calc.get_warmup_period()
        assert warmup == 34

        points = calc.compute(wavy_bars[:warmup])
        last = points[-1]
        assert last.has_macd_signal()
        assert last.has_bollinger()
        assert last.stochastic is not None
        assert last.rsi is not None

    def test_custom_periods_move_boundaries(self, wavy_bars):
        calc = IndicatorCalculator(IndicatorParams(rsi_period=5, bollinger_period=10,
                                                   stochastic_period=3))
        points = calc.compute(wavy_bars)

        assert points[4].rsi is None
        assert points[5].rsi is not None
        assert points[8].bollinger_middle is None
        assert points[9].bollinger_middle is not None
        assert points[1].stochastic is None
        assert points[2].stochastic is not None
