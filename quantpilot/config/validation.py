"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator parameters."""
        errors = []

        for name in (
            "macd_fast_period",
            "macd_slow_period",
            "macd_signal_period",
            "bollinger_period",
            "stochastic_period",
            "rsi_period",
        ):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        # Fast EMA must be shorter than slow EMA
        fast = params.get("macd_fast_period")
        slow = params.get("macd_slow_period")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd_fast_period",
                message="Must be less than macd_slow_period",
                value=fast
            ))

        if "bollinger_std_mult" in params:
            value = params["bollinger_std_mult"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="bollinger_std_mult",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_analytics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate portfolio analytics parameters."""
        errors = []

        if "risk_free_rate" in params:
            value = params["risk_free_rate"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="risk_free_rate",
                    message="Must be an annual rate between 0 and 1",
                    value=value
                ))

        if "periods_per_year" in params:
            value = params["periods_per_year"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="periods_per_year",
                    message="Must be a positive number",
                    value=value
                ))

        if "index_base" in params:
            value = params["index_base"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="index_base",
                    message="Must be a positive number",
                    value=value
                ))

        if "benchmark_symbol" in params:
            value = params["benchmark_symbol"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="benchmark_symbol",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trading signal thresholds."""
        errors = []

        for name in ("rsi_oversold", "rsi_overbought"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        oversold = params.get("rsi_oversold")
        overbought = params.get("rsi_overbought")
        if _is_number(oversold) and _is_number(overbought) and oversold >= overbought:
            errors.append(ValidationError(
                field="rsi_oversold",
                message="Must be less than rsi_overbought",
                value=oversold
            ))

        for name in (
            "rsi_confidence",
            "macd_confidence",
            "bollinger_upper_confidence",
            "bollinger_lower_confidence",
        ):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "analytics" in config:
            errors.extend(ConfigValidator.validate_analytics_params(config["analytics"]))

        if "signals" in config:
            errors.extend(ConfigValidator.validate_signal_params(config["signals"]))

        return errors
