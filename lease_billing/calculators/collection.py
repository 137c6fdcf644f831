"""Collection schedule (régua de cobrança) around an installment's due date."""

from datetime import date, timedelta

from lease_billing.calculators.dates import as_date, today
from lease_billing.models import CollectionEvent, CollectionEventType


def collection_schedule(due_date: date) -> list[CollectionEvent]:
    """All collection events for ``due_date``, earliest first."""
    due_date = as_date(due_date)
    events = [
        CollectionEvent(
            event_type=event_type,
            offset_days=event_type.offset_days,
            scheduled_date=due_date + timedelta(days=event_type.offset_days),
            description=event_type.description,
        )
        for event_type in CollectionEventType
    ]
    return sorted(events, key=lambda event: event.offset_days)


def current_collection_event(due_date: date, reference_date: date | None = None) -> CollectionEvent | None:
    """Latest event already due on ``reference_date``, or None before the reminder."""
    if reference_date is None:
        reference_date = today()
    reference_date = as_date(reference_date)

    current = None
    for event in collection_schedule(due_date):
        if event.scheduled_date <= reference_date:
            current = event
    return current
