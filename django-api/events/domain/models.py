"""Domain models representing submissions and persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, Self, TypeVar

from events.domain.value_objects import Capacity, EventId, Price

T = TypeVar("T")

# Row offsets are bound as signed 64-bit SQL integers.
MAX_OFFSET = 2**63 - 1


class EventStatus(Enum):
    """Publication status of an event."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


@dataclass(frozen=True)
class EventSubmission:
    """An event create/update request prior to acceptance."""

    name: str
    description: str
    begin_enrollment_at: datetime
    close_enrollment_at: datetime
    begin_event_at: datetime
    end_event_at: datetime
    location: str | None = None
    base_price: int = 0
    max_price: int = 0
    limit_of_enrollment: int = 0


@dataclass(frozen=True)
class EventState:
    """Fields derived from an accepted submission."""

    free: bool
    offline: bool
    status: EventStatus = EventStatus.DRAFT


@dataclass(frozen=True)
class Event:
    """Domain representation of a persisted Event."""

    id: EventId
    name: str
    description: str
    begin_enrollment_at: datetime
    close_enrollment_at: datetime
    begin_event_at: datetime
    end_event_at: datetime
    location: str | None
    base_price: Price
    max_price: Price
    limit_of_enrollment: Capacity
    free: bool
    offline: bool
    status: EventStatus


@dataclass(frozen=True)
class SortOrder:
    """One ``property,DIRECTION`` ordering clause."""

    property: str
    descending: bool = False

    @classmethod
    def parse(cls, value: str) -> tuple[Self, ...]:
        """Parse ``"name,DESC"`` style clauses.

        The trailing token is a direction when it reads ASC or DESC
        (any case); every other token is a property sorted that way.
        """
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        descending = False
        if tokens and tokens[-1].upper() in ("ASC", "DESC"):
            descending = tokens.pop().upper() == "DESC"
        return tuple(cls(property=token, descending=descending) for token in tokens)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page selection with optional ordering."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index cannot be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least one")
        if self.offset > MAX_OFFSET:
            raise ValueError("Page index is too large")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of results plus the totals needed for navigation."""

    items: tuple[T, ...]
    number: int
    size: int
    total_elements: int
    sort: tuple[SortOrder, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages
