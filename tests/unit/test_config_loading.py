"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from quantpilot.config.defaults import AnalyticsParams, IndicatorParams, get_default_config
from quantpilot.config.loader import CONFIG_FILENAME, ConfigLoader, build_config
from quantpilot.config.validation import ConfigValidator
from quantpilot.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration carries the standard periods."""
        config = get_default_config()

        assert config.indicators.macd_fast_period == 12
        assert config.indicators.macd_slow_period == 26
        assert config.indicators.rsi_period == 14
        assert config.analytics.periods_per_year == 252.0
        assert config.signals.rsi_oversold == 30.0
        assert config.recommendations.max_allocation_pct == 40.0
        assert config.market_data.api_key_env == "ALPHA_VANTAGE_API_KEY"

    def test_params_are_frozen(self) -> None:
        params = IndicatorParams()
        with pytest.raises(AttributeError):
            params.rsi_period = 7  # type: ignore[misc]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path) -> None:
        """Without a config file the merged dict equals the defaults."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["indicators"]["rsi_period"] == 14
        assert config["analytics"]["benchmark_symbol"] == "SPY"

    def test_file_overrides_defaults(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            "indicators:\n  rsi_period: 21\nanalytics:\n  benchmark_symbol: QQQ\n"
        )
        config = ConfigLoader.create(tmp_path).load()

        assert config.indicators.rsi_period == 21
        assert config.indicators.macd_fast_period == 12
        assert config.analytics.benchmark_symbol == "QQQ"

    def test_runtime_overrides_win(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("analytics:\n  risk_free_rate: 0.05\n")
        config = ConfigLoader.create(tmp_path).load({"analytics": {"risk_free_rate": 0.03}})

        assert config.analytics.risk_free_rate == 0.03

    def test_empty_file(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}

    def test_invalid_yaml(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("indicators: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_file_config()

    def test_non_mapping_file(self, tmp_path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load()

        assert exc_info.value.source.endswith(CONFIG_FILENAME)

    def test_build_config_ignores_unknown_keys(self) -> None:
        config = build_config({
            "analytics": {"periods_per_year": 12.0, "unknown": True},
            "not_a_section": {},
        })

        assert config.analytics == AnalyticsParams(periods_per_year=12.0)
        assert config.indicators == IndicatorParams()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        loader = ConfigLoader.create(Path("/nonexistent"))
        assert ConfigValidator.validate_config(loader.merge_config()) == []

    def test_invalid_indicator_periods(self) -> None:
        errors = ConfigValidator.validate_indicator_params({
            "rsi_period": 0,
            "macd_fast_period": 30,
            "macd_slow_period": 26,
            "bollinger_std_mult": -1,
        })
        fields = {error.field for error in errors}

        assert fields == {"rsi_period", "macd_fast_period", "bollinger_std_mult"}

    def test_invalid_analytics_params(self) -> None:
        errors = ConfigValidator.validate_analytics_params({
            "risk_free_rate": 4.0,
            "periods_per_year": 0,
        })
        fields = {error.field for error in errors}

        assert "risk_free_rate" in fields
        assert "periods_per_year" in fields

    def test_invalid_signal_thresholds(self) -> None:
        errors = ConfigValidator.validate_signal_params({
            "rsi_oversold": 80.0,
            "rsi_overbought": 70.0,
            "macd_confidence": 1.5,
        })
        fields = {error.field for error in errors}

        assert "rsi_oversold" in fields
        assert "macd_confidence" in fields
