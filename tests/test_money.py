"""Tests for decimal money helpers."""

from decimal import Decimal

import pytest

from lease_billing.exceptions import InvalidArgumentError
from lease_billing.money import CENT, non_negative, round_money, to_decimal


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_goes_through_str(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int_and_str(self) -> None:
        assert to_decimal(1000) == Decimal("1000")
        assert to_decimal("12.34") == Decimal("12.34")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("5.5")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), True])
    def test_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError):
            to_decimal(value)  # type: ignore[arg-type]


class TestRoundMoney:
    """Tests for round_money."""

    def test_cent_constant(self) -> None:
        assert CENT == Decimal("0.01")

    def test_rounds_half_up(self) -> None:
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("2.344")) == Decimal("2.34")
        assert round_money(Decimal("0.005")) == Decimal("0.01")

    def test_always_two_places(self) -> None:
        assert str(round_money(1000)) == "1000.00"


class TestNonNegative:
    """Tests for non_negative."""

    def test_zero_allowed(self) -> None:
        assert non_negative(0, "principal") == 0

    def test_negative_rejected_with_field_name(self) -> None:
        with pytest.raises(InvalidArgumentError, match="principal must not be negative"):
            non_negative(-1, "principal")
