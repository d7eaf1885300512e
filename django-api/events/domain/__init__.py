from events.domain.errors import ValidationError
from events.domain.models import (
    Event,
    EventState,
    EventStatus,
    EventSubmission,
    Page,
    PageRequest,
    SortOrder,
)
from events.domain.value_objects import Capacity, EventId, Price

__all__ = [
    "Event",
    "EventState",
    "EventStatus",
    "EventSubmission",
    "Page",
    "PageRequest",
    "SortOrder",
    "ValidationError",
    "EventId",
    "Price",
    "Capacity",
]
