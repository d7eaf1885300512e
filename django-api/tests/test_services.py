"""Unit tests for EventService.

These test orchestration and domain error mapping against an in-memory store.
Run with: pytest tests/test_services.py -v
"""

from dataclasses import replace
from datetime import datetime

import pytest

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
    SortOrder,
)
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidPageRequestError,
)
from events.services.event_service import EventService
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed store assigning sequential ids."""

    def __init__(self) -> None:
        self.events: dict[int, Event] = {}
        self.reads = 0

    def list_events(self, page_request: PageRequest) -> Page[Event]:
        items = sorted(self.events.values(), key=lambda event: event.id.value)
        window = items[page_request.offset : page_request.offset + page_request.size]
        return Page(
            items=tuple(window),
            number=page_request.page,
            size=page_request.size,
            total_elements=len(items),
        )

    def get_event(self, event_id: EventId) -> Event | None:
        self.reads += 1
        return self.events.get(event_id.value)

    def add_event(self, submission: EventSubmission, state: EventState) -> Event:
        return self._put(EventId(len(self.events) + 1), submission, state)

    def update_event(
        self, event_id: EventId, submission: EventSubmission, state: EventState
    ) -> Event:
        return self._put(event_id, submission, state)

    def _put(self, event_id: EventId, submission: EventSubmission, state: EventState) -> Event:
        event = Event(
            id=event_id,
            name=submission.name,
            description=submission.description,
            begin_enrollment_at=submission.begin_enrollment_at,
            close_enrollment_at=submission.close_enrollment_at,
            begin_event_at=submission.begin_event_at,
            end_event_at=submission.end_event_at,
            location=submission.location,
            base_price=Price(submission.base_price),
            max_price=Price(submission.max_price),
            limit_of_enrollment=Capacity(submission.limit_of_enrollment),
            free=state.free,
            offline=state.offline,
            status=state.status,
        )
        self.events[event_id.value] = event
        return event


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store) -> EventService:
    return EventService(store)


class TestCreateEvent:
    """Tests for EventService.create_event."""

    def test_accepted_submission_is_saved_with_derived_state(self, service, store, make_submission):
        result = service.create_event(make_submission(location="Seoul"))

        assert result.ok
        assert result.event.id == EventId(1)
        assert result.event.free is True
        assert result.event.offline is True
        assert result.event.status is EventStatus.DRAFT
        assert store.events[1] == result.event

    def test_rejected_submission_is_not_saved(self, service, store, make_submission):
        result = service.create_event(make_submission(base_price=500, max_price=100))

        assert not result.ok
        assert result.event is None
        assert [error.code for error in result.errors] == ["wrongPrice"]
        assert store.events == {}


class TestGetEvent:
    """Tests for EventService.get_event."""

    def test_get_event_invalid_id_raises_error(self, service):
        """get_event raises InvalidEventIdError for a non-numeric id."""
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-number")

    def test_get_event_not_found_raises_error(self, service):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError) as exc_info:
            service.get_event("11883")
        assert exc_info.value.event_id == "11883"

    def test_get_event_returns_saved_event(self, service, make_submission):
        created = service.create_event(make_submission()).event
        assert service.get_event(str(created.id)) == created


class TestUpdateEvent:
    """Tests for EventService.update_event."""

    def test_update_rederives_flags(self, service, make_submission):
        created = service.create_event(make_submission()).event
        assert created.free and not created.offline

        result = service.update_event(
            created,
            make_submission(name="Updated Event", base_price=100, max_price=200, location="Seoul"),
        )

        assert result.ok
        assert result.event.id == created.id
        assert result.event.name == "Updated Event"
        assert result.event.free is False
        assert result.event.offline is True

    def test_update_keeps_existing_status(self, service, store, make_submission):
        created = service.create_event(make_submission()).event
        store.events[created.id.value] = replace(created, status=EventStatus.PUBLISHED)

        existing = service.get_event(str(created.id))
        result = service.update_event(existing, make_submission(name="Renamed"))

        assert result.event.status is EventStatus.PUBLISHED

    def test_update_with_rule_violation_leaves_event_untouched(self, service, store, make_submission):
        created = service.create_event(make_submission()).event

        result = service.update_event(
            created,
            make_submission(
                begin_event_at=datetime(2018, 11, 25), end_event_at=datetime(2018, 11, 24)
            ),
        )

        assert [error.code for error in result.errors] == ["wrongValue"]
        assert store.events[created.id.value] == created

    def test_lookup_then_update_reads_store_once(self, service, store, make_submission):
        """The event loaded by get_event is reused; update does not fetch it again."""
        created = service.create_event(make_submission()).event
        store.reads = 0

        existing = service.get_event(str(created.id))
        service.update_event(existing, make_submission(name="Renamed"))

        assert store.reads == 1
        assert store.events[created.id.value].name == "Renamed"
