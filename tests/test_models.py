"""Tests for domain models."""

from dataclasses import FrozenInstanceError, replace
from datetime import date
from decimal import Decimal

import pytest

from lease_billing.calculators import summarize_installments
from lease_billing.exceptions import InvalidArgumentError
from lease_billing.models import (
    CollectionEventType,
    Debt,
    Installment,
    InstallmentStatus,
    PaymentAllocationResult,
)


class TestInstallment:
    """Tests for Installment model."""

    def test_defaults(self, sample_contract_id: str) -> None:
        """Test installment defaults."""
        installment = Installment(
            installment_id="parcela-001",
            contract_id=sample_contract_id,
            installment_number=1,
            competence="2025-03",
            due_date=date(2025, 3, 10),
            principal=Decimal("1800.00"),
        )

        assert installment.status is InstallmentStatus.PENDENTE
        assert installment.penalty == 0
        assert installment.interest == 0
        assert installment.discount == 0
        assert installment.paid_amount is None
        assert installment.paid_date is None

    def test_total_and_debt(self, overdue_installment: Installment) -> None:
        """Test total net of discount and the debt view."""
        installment = Installment(
            installment_id=overdue_installment.installment_id,
            contract_id=overdue_installment.contract_id,
            installment_number=1,
            competence="2025-01",
            due_date=overdue_installment.due_date,
            principal=Decimal("1000.00"),
            penalty=Decimal("20.00"),
            interest=Decimal("9.90"),
            discount=Decimal("29.90"),
            status=InstallmentStatus.VENCIDO,
        )

        assert installment.total == Decimal("1000.00")
        assert installment.debt == Debt(principal=Decimal("1000"), penalty=Decimal("20"), interest=Decimal("9.9"))

    def test_frozen(self, overdue_installment: Installment) -> None:
        """Test that installments are immutable."""
        with pytest.raises(FrozenInstanceError):
            overdue_installment.principal = Decimal("1")  # type: ignore[misc]

    def test_float_amounts_converted_to_decimal(self, sample_contract_id: str) -> None:
        """Test that float and str amounts become Decimal on construction."""
        installment = Installment(
            installment_id="parcela-002",
            contract_id=sample_contract_id,
            installment_number=2,
            competence="2025-02",
            due_date=date(2025, 2, 10),
            principal=1000.5,  # type: ignore[arg-type]
            interest="0.1",  # type: ignore[arg-type]
            paid_amount=0,  # type: ignore[arg-type]
        )

        assert installment.principal == Decimal("1000.5")
        assert isinstance(installment.interest, Decimal)
        assert installment.paid_amount == Decimal("0")
        assert installment.total == Decimal("1000.60")
        assert summarize_installments([installment]).grand_total == Decimal("1000.60")

    @pytest.mark.parametrize("name", ["principal", "penalty", "interest", "discount", "paid_amount"])
    def test_negative_amount_rejected(self, overdue_installment: Installment, name: str) -> None:
        """Test that negative amounts are rejected on construction."""
        with pytest.raises(InvalidArgumentError, match=f"{name} must not be negative"):
            replace(overdue_installment, **{name: Decimal("-0.01")})

    def test_non_numeric_amount_rejected(self, overdue_installment: Installment) -> None:
        """Test that a non-numeric principal is rejected."""
        with pytest.raises(InvalidArgumentError):
            replace(overdue_installment, principal="abc")


class TestInstallmentStatus:
    """Tests for InstallmentStatus."""

    @pytest.mark.parametrize(
        ("status", "is_open"),
        [
            (InstallmentStatus.PENDENTE, True),
            (InstallmentStatus.EMITIDO, True),
            (InstallmentStatus.VENCIDO, True),
            (InstallmentStatus.PAGO, False),
            (InstallmentStatus.CANCELADO, False),
            (InstallmentStatus.ESTORNADO, False),
        ],
    )
    def test_is_open(self, status: InstallmentStatus, is_open: bool) -> None:
        assert status.is_open is is_open

    def test_values(self) -> None:
        assert InstallmentStatus("vencido") is InstallmentStatus.VENCIDO


class TestCollectionEventType:
    """Tests for CollectionEventType."""

    def test_offsets(self) -> None:
        assert [e.offset_days for e in CollectionEventType] == [-3, 1, 7, 15, 30]


class TestPaymentAllocationResult:
    """Tests for PaymentAllocationResult."""

    def test_as_debt(self) -> None:
        result = PaymentAllocationResult(
            principal=Decimal("995.00"),
            penalty=Decimal("0.00"),
            interest=Decimal("0.00"),
            amount_paid=Decimal("30"),
            remaining_balance=Decimal("995.00"),
        )

        assert result.settled is None
        assert result.as_debt() == Debt(principal=Decimal("995"), penalty=Decimal("0"), interest=Decimal("0"))
