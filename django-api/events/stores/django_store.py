"""Django ORM implementation of the EventStore."""

from django.db import transaction

from events import models
from events.domain import (
    Capacity,
    Event,
    EventId,
    EventState,
    EventStatus,
    EventSubmission,
    Page,
    PageRequest,
    Price,
)
from events.stores.interfaces import SORTABLE_PROPERTIES, EventStore


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        begin_enrollment_at=row.begin_enrollment_at,
        close_enrollment_at=row.close_enrollment_at,
        begin_event_at=row.begin_event_at,
        end_event_at=row.end_event_at,
        location=row.location,
        base_price=Price(row.base_price),
        max_price=Price(row.max_price),
        limit_of_enrollment=Capacity(row.limit_of_enrollment),
        free=row.free,
        offline=row.offline,
        status=EventStatus(row.status),
    )


def _apply(row: models.Event, submission: EventSubmission, state: EventState) -> None:
    row.name = submission.name
    row.description = submission.description
    row.begin_enrollment_at = submission.begin_enrollment_at
    row.close_enrollment_at = submission.close_enrollment_at
    row.begin_event_at = submission.begin_event_at
    row.end_event_at = submission.end_event_at
    row.location = submission.location
    row.base_price = submission.base_price
    row.max_price = submission.max_price
    row.limit_of_enrollment = submission.limit_of_enrollment
    row.free = state.free
    row.offline = state.offline
    row.status = state.status.value


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self, page_request: PageRequest) -> Page[Event]:
        ordering = [
            ("-" if order.descending else "") + SORTABLE_PROPERTIES[order.property]
            for order in page_request.sort
        ]
        queryset = models.Event.objects.order_by(*ordering, "id")
        total = queryset.count()
        start = page_request.offset
        rows = queryset[start : start + page_request.size]
        return Page(
            items=tuple(_to_domain(row) for row in rows),
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
            sort=page_request.sort,
        )

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row is not None else None

    def add_event(self, submission: EventSubmission, state: EventState) -> Event:
        row = models.Event()
        _apply(row, submission, state)
        row.save()
        return _to_domain(row)

    @transaction.atomic
    def update_event(
        self, event_id: EventId, submission: EventSubmission, state: EventState
    ) -> Event:
        row = models.Event.objects.select_for_update().get(pk=event_id.value)
        _apply(row, submission, state)
        row.save()
        return _to_domain(row)
