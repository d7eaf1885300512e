"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, EventState, EventSubmission, Page, PageRequest

# Wire name -> domain attribute for every property a page may be sorted by.
SORTABLE_PROPERTIES = {
    "id": "id",
    "name": "name",
    "description": "description",
    "beginEnrollmentAt": "begin_enrollment_at",
    "closeEnrollmentAt": "close_enrollment_at",
    "beginEventAt": "begin_event_at",
    "endEventAt": "end_event_at",
    "location": "location",
    "basePrice": "base_price",
    "maxPrice": "max_price",
    "limitOfEnrollment": "limit_of_enrollment",
    "free": "free",
    "offline": "offline",
    "eventStatus": "status",
}


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self, page_request: PageRequest) -> Page[Event]:
        """Return one page of events, ordered by the request's sort (id ascending by default).

        Sort properties are assumed to be keys of SORTABLE_PROPERTIES.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def add_event(self, submission: EventSubmission, state: EventState) -> Event:
        """Persist a new event and return it with its assigned ID."""
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, submission: EventSubmission, state: EventState
    ) -> Event:
        """Overwrite an existing event with an accepted submission."""
        ...
