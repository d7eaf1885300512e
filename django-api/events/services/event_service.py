"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models, rejected-submission results or domain errors
"""

from dataclasses import dataclass, replace

import structlog

from events.domain import rules
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidPageRequestError,
    ValidationError,
)
from events.domain.models import Event, EventSubmission, Page, PageRequest
from events.domain.value_objects import EventId
from events.stores.interfaces import SORTABLE_PROPERTIES, EventStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a create or update: the saved event or the reasons it was refused."""

    event: Event | None = None
    errors: tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def create_event(self, submission: EventSubmission) -> SubmissionResult:
        """Validate a submission and persist it as a new DRAFT event."""
        errors = rules.validate(submission)
        if errors:
            logger.info(
                "event_submission_rejected",
                codes=[error.code for error in errors],
            )
            return SubmissionResult(errors=tuple(errors))

        event = self._store.add_event(submission, rules.derive_state(submission))
        logger.info("event_created", event_id=event.id.value)
        return SubmissionResult(event=event)

    def list_events(self, page_request: PageRequest) -> Page[Event]:
        """Return one page of events.

        Raises:
            InvalidPageRequestError: If a sort property is not sortable.
        """
        for order in page_request.sort:
            if order.property not in SORTABLE_PROPERTIES:
                raise InvalidPageRequestError(f"Cannot sort by {order.property!r}")
        return self._store.list_events(page_request)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not an integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(self._parse_id(event_id))
        if event is None:
            logger.info("event_not_found", event_id=event_id)
            raise EventNotFoundError(event_id)
        return event

    def update_event(self, existing: Event, submission: EventSubmission) -> SubmissionResult:
        """Replace the fields of an event loaded with get_event.

        Derived flags are recomputed from the submission; the current
        status is kept.
        """
        errors = rules.validate(submission)
        if errors:
            logger.info(
                "event_submission_rejected",
                event_id=existing.id.value,
                codes=[error.code for error in errors],
            )
            return SubmissionResult(errors=tuple(errors))

        state = replace(rules.derive_state(submission), status=existing.status)
        event = self._store.update_event(existing.id, submission, state)
        logger.info("event_updated", event_id=event.id.value)
        return SubmissionResult(event=event)

    @staticmethod
    def _parse_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidEventIdError() from exc
