"""Decimal helpers for monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from lease_billing.config import DECIMAL_PLACES
from lease_billing.exceptions import InvalidArgumentError

Amount = Decimal | int | float | str

CENT = Decimal(1).scaleb(-DECIMAL_PLACES)
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")


def to_decimal(value: Amount, name: str = "value") -> Decimal:
    """Convert a numeric input to Decimal.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from exc
    if not result.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return result


def round_money(value: Amount) -> Decimal:
    """Round to cents, half up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def non_negative(value: Amount, name: str) -> Decimal:
    """Convert ``value`` and reject negatives."""
    result = to_decimal(value, name)
    if result < 0:
        raise InvalidArgumentError(f"{name} must not be negative")
    return result
