"""Annual rent adjustment (reajuste) by inflation index."""

import logging
from datetime import date

from dateutil.relativedelta import relativedelta

from lease_billing.calculators.dates import as_date, today
from lease_billing.config import BillingConfig
from lease_billing.exceptions import InvalidArgumentError
from lease_billing.models import RentAdjustmentResult
from lease_billing.money import HUNDRED, Amount, non_negative, round_money, to_decimal

logger = logging.getLogger(__name__)


def calculate_adjustment(current_value: Amount, index_variation_percent: Amount) -> RentAdjustmentResult:
    """Apply an index variation to the current rent.

    A negative variation (deflation) lowers the rent. Variations below
    -100% are rejected.

    Parameters
    ----------
    current_value : Amount
        Current rent.
    index_variation_percent : Amount
        Accumulated index variation, in percent (e.g. IGP-M over 12 months).

    Returns
    -------
    RentAdjustmentResult
        Previous and adjusted rent and their difference.
    """
    current_value = non_negative(current_value, "current_value")
    variation = to_decimal(index_variation_percent, "index_variation_percent")
    if variation < -HUNDRED:
        raise InvalidArgumentError("index_variation_percent must not be below -100")

    factor = 1 + variation / HUNDRED
    adjusted_value = round_money(current_value * factor)
    difference = round_money(adjusted_value - current_value)

    logger.debug("Adjusted rent %s by %s%% to %s", current_value, variation, adjusted_value)

    return RentAdjustmentResult(
        previous_value=current_value,
        adjustment_percent=variation,
        adjusted_value=adjusted_value,
        difference=difference,
    )


def calculate_next_adjustment_date(contract_start_date: date) -> date:
    """Anniversary of the contract start, one year later.

    A contract starting on Feb 29 is adjusted on Feb 28 of the next year.
    """
    return as_date(contract_start_date) + relativedelta(years=1)


def is_in_adjustment_window(
    contract_start_date: date,
    reference_date: date | None = None,
    window_days: int | None = None,
    config: BillingConfig | None = None,
) -> bool:
    """Whether ``reference_date`` is within ``window_days`` of the next adjustment date, inclusive.

    Without an explicit ``window_days`` the width comes from
    ``config.adjustment_window_days`` (30 days by default).
    """
    if window_days is None:
        window_days = (config or BillingConfig()).adjustment_window_days
    if window_days < 0:
        raise InvalidArgumentError("window_days must not be negative")
    if reference_date is None:
        reference_date = today()

    anniversary = calculate_next_adjustment_date(contract_start_date)
    window = relativedelta(days=window_days)
    return anniversary - window <= as_date(reference_date) <= anniversary + window
