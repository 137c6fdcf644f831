"""Lease billing calculators."""

from lease_billing.calculators.adjustment import (
    calculate_adjustment,
    calculate_next_adjustment_date,
    is_in_adjustment_window,
)
from lease_billing.calculators.charges import (
    calculate_late_interest,
    calculate_penalty,
    calculate_total_with_penalty_and_interest,
)
from lease_billing.calculators.collection import collection_schedule, current_collection_event
from lease_billing.calculators.dates import calculate_days_late
from lease_billing.calculators.installments import assess_installment, is_overdue, summarize_installments
from lease_billing.calculators.payments import apply_partial_payment, payment_breakdown, settle_installment

__all__ = [
    "apply_partial_payment",
    "assess_installment",
    "calculate_adjustment",
    "calculate_days_late",
    "calculate_late_interest",
    "calculate_next_adjustment_date",
    "calculate_penalty",
    "calculate_total_with_penalty_and_interest",
    "collection_schedule",
    "current_collection_event",
    "is_in_adjustment_window",
    "is_overdue",
    "payment_breakdown",
    "settle_installment",
    "summarize_installments",
]
