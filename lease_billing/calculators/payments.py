"""Partial payment allocation: interest first, then penalty, then principal."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal

from lease_billing.calculators.dates import as_date, today
from lease_billing.exceptions import InvalidInstallmentStateError, PaymentExceedsDebtError
from lease_billing.models import (
    Debt,
    Installment,
    InstallmentStatus,
    PaymentAllocationResult,
    PaymentBreakdown,
)
from lease_billing.money import ZERO, Amount, non_negative, round_money

logger = logging.getLogger(__name__)


def _allocate(debt: Debt, amount_paid: Decimal) -> tuple[Decimal, Decimal, Decimal]:
    """Run the waterfall and return the new (interest, penalty, principal)."""
    total_owed = debt.total
    if amount_paid > total_owed:
        raise PaymentExceedsDebtError(amount_paid, total_owed)

    remaining = amount_paid
    balances = []
    # Rounded at every step so repeated partial payments do not drift.
    for owed in (debt.interest, debt.penalty, debt.principal):
        applied = min(remaining, owed)
        balances.append(round_money(owed - applied))
        remaining = round_money(remaining - applied)

    new_interest, new_penalty, new_principal = balances
    return new_interest, new_penalty, new_principal


def apply_partial_payment(debt: Debt, amount_paid: Amount) -> PaymentAllocationResult:
    """Apply a payment to a debt.

    The payment clears interest, then penalty, then principal. The input
    debt is left untouched; the result describes what is still owed.

    Parameters
    ----------
    debt : Debt
        Amounts currently owed.
    amount_paid : Amount
        Payment received.

    Returns
    -------
    PaymentAllocationResult
        Remaining amounts per category. ``settled`` is ``True`` when nothing
        is left to pay and ``None`` otherwise.

    Raises
    ------
    InvalidArgumentError
        If the payment is negative.
    PaymentExceedsDebtError
        If the payment is larger than the total owed.
    """
    amount_paid = non_negative(amount_paid, "amount_paid")
    new_interest, new_penalty, new_principal = _allocate(debt, amount_paid)
    remaining_balance = round_money(new_principal + new_penalty + new_interest)

    logger.debug("Applied payment of %s; remaining balance %s", amount_paid, remaining_balance)

    return PaymentAllocationResult(
        principal=new_principal,
        penalty=new_penalty,
        interest=new_interest,
        amount_paid=amount_paid,
        remaining_balance=remaining_balance,
        settled=True if remaining_balance == 0 else None,
    )


def _breakdown(debt: Debt, result: PaymentAllocationResult) -> PaymentBreakdown:
    return PaymentBreakdown(
        interest_applied=round_money(debt.interest - result.interest),
        penalty_applied=round_money(debt.penalty - result.penalty),
        principal_applied=round_money(debt.principal - result.principal),
        remaining_balance=result.remaining_balance,
        settled=bool(result.settled),
    )


def payment_breakdown(debt: Debt, amount_paid: Amount) -> PaymentBreakdown:
    """Report how much of a payment went to each debt category."""
    return _breakdown(debt, apply_partial_payment(debt, amount_paid))


def settle_installment(
    installment: Installment,
    amount_paid: Amount,
    paid_date: date | None = None,
) -> tuple[Installment, PaymentBreakdown]:
    """Register a manual payment (baixa manual) against an installment.

    The payment goes through the same waterfall as
    :func:`apply_partial_payment`. The returned installment carries the
    remaining principal, penalty and interest, the accumulated paid amount
    and the payment date. A discount is deducted from the principal before
    the waterfall and kept on the returned installment, so its ``total`` is
    the remaining balance. Its status becomes ``pago`` when nothing is left
    to pay and ``pendente`` otherwise.

    Parameters
    ----------
    installment : Installment
        Installment being paid. Must still be open.
    amount_paid : Amount
        Payment received.
    paid_date : date | None
        Payment date; defaults to today.

    Returns
    -------
    tuple[Installment, PaymentBreakdown]
        Updated installment and how the payment was split.

    Raises
    ------
    InvalidInstallmentStateError
        If the installment is paid, cancelled or reversed.
    InvalidArgumentError
        If the payment is negative or the discount exceeds the principal.
    PaymentExceedsDebtError
        If the payment is larger than what the installment still owes.
    """
    if not installment.status.is_open:
        raise InvalidInstallmentStateError(
            f"Installment {installment.installment_id} is {installment.status.value} and cannot be paid"
        )

    # principal net of discount; the discount is added back on the updated installment
    debt = Debt(
        principal=installment.principal - installment.discount,
        penalty=installment.penalty,
        interest=installment.interest,
    )
    result = apply_partial_payment(debt, amount_paid)
    previously_paid = installment.paid_amount if installment.paid_amount is not None else ZERO

    updated = replace(
        installment,
        principal=round_money(result.principal + installment.discount),
        penalty=result.penalty,
        interest=result.interest,
        status=InstallmentStatus.PAGO if result.settled else InstallmentStatus.PENDENTE,
        paid_amount=round_money(previously_paid + result.amount_paid),
        paid_date=as_date(paid_date) if paid_date is not None else today(),
    )
    logger.info(
        "Installment %s received %s; status %s, remaining %s",
        installment.installment_id, result.amount_paid, updated.status.value, result.remaining_balance,
    )
    return updated, _breakdown(debt, result)
