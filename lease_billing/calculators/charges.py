"""Penalty (multa) and late interest (juros de mora) calculations."""

import logging
from decimal import Decimal

from lease_billing.config import DEFAULT_DAILY_INTEREST_PERCENT, DEFAULT_PENALTY_PERCENT
from lease_billing.exceptions import InvalidArgumentError
from lease_billing.models import ChargeBreakdown
from lease_billing.money import HUNDRED, ZERO, Amount, non_negative, round_money

logger = logging.getLogger(__name__)


def _days(days_late: int) -> Decimal:
    days = non_negative(days_late, "days_late")
    if days != days.to_integral_value():
        raise InvalidArgumentError(f"days_late must be a whole number of days, got {days_late!r}")
    return days


def calculate_penalty(principal: Amount, percent: Amount = DEFAULT_PENALTY_PERCENT) -> Decimal:
    """Calculate the one-off late penalty as a percentage of the principal.

    Parameters
    ----------
    principal : Amount
        Base amount the penalty applies to.
    percent : Amount
        Penalty percentage (default 2%).

    Returns
    -------
    Decimal
        Penalty rounded to cents.

    Raises
    ------
    InvalidArgumentError
        If principal or percent is negative.
    """
    principal = non_negative(principal, "principal")
    percent = non_negative(percent, "percent")

    if principal == 0:
        return ZERO

    return round_money(principal * percent / HUNDRED)


def calculate_late_interest(
    principal: Amount,
    days_late: int,
    daily_percent: Amount = DEFAULT_DAILY_INTEREST_PERCENT,
) -> Decimal:
    """Calculate simple per-diem late interest.

    ``daily_percent`` of 0.033 approximates 1% a month over 30 days; the
    accrual is simple, not compound.

    Raises
    ------
    InvalidArgumentError
        If principal, days_late or daily_percent is negative.
    """
    principal = non_negative(principal, "principal")
    days = _days(days_late)
    daily_percent = non_negative(daily_percent, "daily_percent")

    if principal == 0 or days == 0:
        return ZERO

    return round_money(principal * daily_percent / HUNDRED * days)


def calculate_total_with_penalty_and_interest(
    principal: Amount,
    days_late: int,
    *,
    discount: Amount | None = None,
    penalty_percent: Amount | None = None,
    daily_interest_percent: Amount | None = None,
) -> ChargeBreakdown:
    """Break down the amount due for an installment paid ``days_late`` days late.

    Penalty and interest are charged on the discounted base amount. The
    ``discount`` and ``base_amount`` fields of the result are only filled
    when a positive discount was given.

    Parameters
    ----------
    principal : Amount
        Rent amount of the installment.
    days_late : int
        Days past the due date.
    discount : Amount | None
        Discount granted on the principal.
    penalty_percent : Amount | None
        Penalty percentage; defaults to 2%.
    daily_interest_percent : Amount | None
        Daily interest percentage; defaults to 0.033%.

    Returns
    -------
    ChargeBreakdown
        Principal, penalty, interest and total due.
    """
    principal = non_negative(principal, "principal")
    days = _days(days_late)
    discount = non_negative(discount if discount is not None else 0, "discount")
    if discount > principal:
        raise InvalidArgumentError("discount must not exceed principal")

    if penalty_percent is None:
        penalty_percent = DEFAULT_PENALTY_PERCENT
    if daily_interest_percent is None:
        daily_interest_percent = DEFAULT_DAILY_INTEREST_PERCENT

    base_amount = principal - discount

    if days == 0:
        penalty = ZERO
        interest = ZERO
        total = round_money(base_amount)
    else:
        penalty = calculate_penalty(base_amount, penalty_percent)
        interest = calculate_late_interest(base_amount, int(days), daily_interest_percent)
        total = round_money(base_amount + penalty + interest)

    logger.debug(
        "Charges for %s over %s days: penalty=%s interest=%s total=%s",
        principal, days, penalty, interest, total,
    )

    if discount > 0:
        return ChargeBreakdown(
            principal=principal,
            penalty=penalty,
            interest=interest,
            total=total,
            discount=discount,
            base_amount=base_amount,
        )
    return ChargeBreakdown(principal=principal, penalty=penalty, interest=interest, total=total)
