"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

SUBMISSION_OBJECT = "submission"


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_PAGE_REQUEST = "INVALID_PAGE_REQUEST"


@dataclass(frozen=True)
class ValidationError:
    """A reported problem with a submission.

    Field errors name the offending ``field`` and usually carry the
    ``rejected_value``; global errors leave both unset.
    """

    object_name: str
    code: str
    message: str
    field: str | None = None
    rejected_value: Any = None

    @property
    def is_global(self) -> bool:
        return self.field is None


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidPageRequestError(DomainError):
    """Raised when paging or sort parameters cannot be honoured."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGE_REQUEST,
            message=detail,
        )
