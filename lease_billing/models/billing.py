"""Value records produced and consumed by the billing calculators."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from lease_billing.models.enums import CollectionEventType
from lease_billing.money import non_negative


@dataclass(frozen=True)
class Debt:
    """What is currently owed on an installment, split by category."""

    principal: Decimal
    penalty: Decimal  # multa
    interest: Decimal  # juros

    def __post_init__(self) -> None:
        for name in ("principal", "penalty", "interest"):
            object.__setattr__(self, name, non_negative(getattr(self, name), name))

    @property
    def total(self) -> Decimal:
        return self.principal + self.penalty + self.interest


@dataclass(frozen=True)
class ChargeBreakdown:
    """Amount due for a given lateness.

    ``discount`` and ``base_amount`` are only set when a positive discount
    was applied.
    """

    principal: Decimal
    penalty: Decimal
    interest: Decimal
    total: Decimal
    discount: Decimal | None = None
    base_amount: Decimal | None = None


@dataclass(frozen=True)
class PaymentAllocationResult:
    """State of a debt after a payment. ``settled`` is ``True`` or ``None``."""

    principal: Decimal
    penalty: Decimal
    interest: Decimal
    amount_paid: Decimal
    remaining_balance: Decimal
    settled: bool | None = None

    def as_debt(self) -> Debt:
        """The remaining debt, ready for the next payment."""
        return Debt(principal=self.principal, penalty=self.penalty, interest=self.interest)


@dataclass(frozen=True)
class PaymentBreakdown:
    """How a payment was split across the debt categories."""

    interest_applied: Decimal
    penalty_applied: Decimal
    principal_applied: Decimal
    remaining_balance: Decimal
    settled: bool


@dataclass(frozen=True)
class RentAdjustmentResult:
    previous_value: Decimal
    adjustment_percent: Decimal
    adjusted_value: Decimal
    difference: Decimal


@dataclass(frozen=True)
class CollectionEvent:
    """A scheduled step of the collection schedule."""

    event_type: CollectionEventType
    offset_days: int
    scheduled_date: date
    description: str
