"""Installment-level helpers built on the charge calculators."""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from lease_billing.calculators.charges import calculate_total_with_penalty_and_interest
from lease_billing.calculators.dates import calculate_days_late
from lease_billing.config import BillingConfig
from lease_billing.models import ChargeBreakdown, Installment, InstallmentStatus, InstallmentTotals
from lease_billing.money import round_money

logger = logging.getLogger(__name__)


def is_overdue(installment: Installment, reference_date: date | None = None) -> bool:
    """Open installment with at least one day of delay."""
    return installment.status.is_open and calculate_days_late(installment.due_date, reference_date) > 0


def assess_installment(
    installment: Installment,
    reference_date: date | None = None,
    config: BillingConfig | None = None,
) -> ChargeBreakdown:
    """Compute what an installment costs if paid on ``reference_date``.

    Installments that are no longer open (paid, cancelled, reversed) are
    not charged penalty or interest.
    """
    config = config or BillingConfig()
    days_late = calculate_days_late(installment.due_date, reference_date) if installment.status.is_open else 0

    breakdown = calculate_total_with_penalty_and_interest(
        installment.principal,
        days_late,
        discount=installment.discount,
        penalty_percent=config.penalty_percent,
        daily_interest_percent=config.daily_interest_percent,
    )
    logger.debug(
        "Installment %s (%s) is %d days late, total due %s",
        installment.installment_id, installment.competence, days_late, breakdown.total,
    )
    return breakdown


def summarize_installments(installments: Iterable[Installment]) -> InstallmentTotals:
    """Total principal, penalty and interest over ``installments``.

    The grand total is net of discounts. Every status is counted, including
    those with no installment.
    """
    total_principal = Decimal(0)
    total_penalty = Decimal(0)
    total_interest = Decimal(0)
    total_discount = Decimal(0)
    by_status = {status: 0 for status in InstallmentStatus}
    count = 0

    for installment in installments:
        total_principal += installment.principal
        total_penalty += installment.penalty
        total_interest += installment.interest
        total_discount += installment.discount
        by_status[installment.status] += 1
        count += 1

    return InstallmentTotals(
        total_principal=round_money(total_principal),
        total_penalty=round_money(total_penalty),
        total_interest=round_money(total_interest),
        grand_total=round_money(total_principal + total_penalty + total_interest - total_discount),
        count=count,
        by_status=by_status,
    )
