"""Configuration management for lease-billing."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from lease_billing.exceptions import ConfigurationError

DECIMAL_PLACES = 2
DEFAULT_PENALTY_PERCENT = Decimal("2.0")  # multa
DEFAULT_DAILY_INTEREST_PERCENT = Decimal("0.033")  # juros de mora, ~1% a.m.
DEFAULT_ADJUSTMENT_WINDOW_DAYS = 30
LOG_FORMATS = ("standard", "json")


@dataclass(frozen=True)
class BillingConfig:
    """Rates and windows used when assessing installments."""

    penalty_percent: Decimal = DEFAULT_PENALTY_PERCENT
    daily_interest_percent: Decimal = DEFAULT_DAILY_INTEREST_PERCENT
    adjustment_window_days: int = DEFAULT_ADJUSTMENT_WINDOW_DAYS
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.penalty_percent < 0:
            raise ConfigurationError("penalty_percent must not be negative")
        if self.daily_interest_percent < 0:
            raise ConfigurationError("daily_interest_percent must not be negative")
        if self.adjustment_window_days < 0:
            raise ConfigurationError("adjustment_window_days must not be negative")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "BillingConfig":
        """Create config from environment variables."""
        import os

        return cls(
            penalty_percent=_decimal_env(
                os.getenv("BILLING_PENALTY_PERCENT"), DEFAULT_PENALTY_PERCENT, "BILLING_PENALTY_PERCENT"
            ),
            daily_interest_percent=_decimal_env(
                os.getenv("BILLING_DAILY_INTEREST_PERCENT"),
                DEFAULT_DAILY_INTEREST_PERCENT,
                "BILLING_DAILY_INTEREST_PERCENT",
            ),
            adjustment_window_days=_int_env(
                os.getenv("BILLING_ADJUSTMENT_WINDOW_DAYS"),
                DEFAULT_ADJUSTMENT_WINDOW_DAYS,
                "BILLING_ADJUSTMENT_WINDOW_DAYS",
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _decimal_env(raw: str | None, default: Decimal, name: str) -> Decimal:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from exc
    if not value.is_finite():
        raise ConfigurationError(f"{name} must be finite, got {raw!r}")
    return value


def _int_env(raw: str | None, default: int, name: str) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
