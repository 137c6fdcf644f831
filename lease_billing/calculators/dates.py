"""Date helpers for billing."""

from datetime import date, datetime, timedelta

ONE_DAY = timedelta(days=1)


def as_date(value: date) -> date:
    """Drop the time part of a datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def today() -> date:
    return date.today()


def calculate_days_late(due_date: date, reference_date: date | None = None) -> int:
    """Whole days elapsed since ``due_date``; never negative.

    Two datetimes are compared exactly and the elapsed time floored to
    whole days. Anything else is compared by calendar date.
    """
    if reference_date is None:
        reference_date = today()

    if isinstance(due_date, datetime) and isinstance(reference_date, datetime):
        days = (reference_date - due_date) // ONE_DAY
    else:
        days = (as_date(reference_date) - as_date(due_date)).days

    return max(0, days)
