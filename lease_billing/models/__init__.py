"""Domain models for lease billing."""

from lease_billing.models.billing import (
    ChargeBreakdown,
    CollectionEvent,
    Debt,
    PaymentAllocationResult,
    PaymentBreakdown,
    RentAdjustmentResult,
)
from lease_billing.models.enums import AdjustmentIndex, CollectionEventType, InstallmentStatus
from lease_billing.models.installment import Installment, InstallmentTotals

__all__ = [
    "AdjustmentIndex",
    "ChargeBreakdown",
    "CollectionEvent",
    "CollectionEventType",
    "Debt",
    "Installment",
    "InstallmentStatus",
    "InstallmentTotals",
    "PaymentAllocationResult",
    "PaymentBreakdown",
    "RentAdjustmentResult",
]
