"""Installment (parcela) model."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from lease_billing.models.billing import Debt
from lease_billing.models.enums import InstallmentStatus
from lease_billing.money import ZERO, non_negative, round_money


@dataclass(frozen=True)
class Installment:
    """Monthly rent installment of a lease contract."""

    installment_id: str
    contract_id: str
    installment_number: int  # 1, 2, 3, ...
    competence: str  # YYYY-MM
    due_date: date
    principal: Decimal
    penalty: Decimal = ZERO
    interest: Decimal = ZERO
    status: InstallmentStatus = InstallmentStatus.PENDENTE
    discount: Decimal = ZERO
    paid_amount: Decimal | None = None
    paid_date: date | None = None

    def __post_init__(self) -> None:
        for name in ("principal", "penalty", "interest", "discount"):
            object.__setattr__(self, name, non_negative(getattr(self, name), name))
        if self.paid_amount is not None:
            object.__setattr__(self, "paid_amount", non_negative(self.paid_amount, "paid_amount"))

    @property
    def debt(self) -> Debt:
        return Debt(principal=self.principal, penalty=self.penalty, interest=self.interest)

    @property
    def total(self) -> Decimal:
        """Principal plus charges, net of discount."""
        return round_money(self.principal + self.penalty + self.interest - self.discount)


@dataclass(frozen=True)
class InstallmentTotals:
    """Aggregated amounts over a set of installments."""

    total_principal: Decimal
    total_penalty: Decimal
    total_interest: Decimal
    grand_total: Decimal
    count: int
    by_status: dict[InstallmentStatus, int] = field(default_factory=dict)
