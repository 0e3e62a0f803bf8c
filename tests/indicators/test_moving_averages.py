"""Tests for SMA and EMA calculations"""

import pytest

from quantpilot.indicators.moving_averages import ema, ema_series, sma, sma_series


class TestSMA:
    """Test simple moving average"""

    def test_sma_last_window(self):
        """SMA averages only the trailing window"""
        assert sma([1.0, 2.0, 3.0, 4.0], 2) == 3.5

    def test_sma_insufficient_data(self):
        assert sma([1.0], 2) is None
        assert sma([], 3) is None

    def test_sma_series_boundary(self):
        """Series is None until the window fills"""
        series = sma_series([2.0, 4.0, 6.0, 8.0], 3)
        assert series == [None, None, 4.0, 6.0]


class TestEMA:
    """Test exponential moving average"""

    def test_ema_seed_is_sma(self):
        """With exactly `period` values the EMA is the seed SMA"""
        assert ema([1.0, 2.0, 3.0], 3) == 2.0

    def test_ema_recurrence(self):
        """k = 2 / (3 + 1) = 0.5, so 4 * 0.5 + 2 * 0.5 = 3"""
        assert ema([1.0, 2.0, 3.0, 4.0], 3) == 3.0

    def test_ema_insufficient_data(self):
        assert ema([1.0, 2.0], 3) is None

    def test_ema_series_length_and_boundary(self):
        values = [float(v) for v in range(1, 11)]
        series = ema_series(values, 4)

        assert len(series) == len(values)
        assert all(v is None for v in series[:3])
        assert all(v is not None for v in series[3:])

    def test_ema_series_matches_full_recomputation(self, wavy_bars):
        """Each forward-pass value equals the EMA recomputed from the start"""
        closes = [bar.close for bar in wavy_bars]

        for period in (3, 9, 12, 26):
            series = ema_series(closes, period)
            for i in range(len(closes)):
                assert series[i] == ema(closes[:i + 1], period)

    def test_ema_series_short_input(self):
        assert ema_series([1.0, 2.0], 5) == [None, None]
        assert ema_series([], 5) == []

    def test_ema_tracks_constant_series(self):
        assert ema([5.0] * 30, 12) == pytest.approx(5.0)
