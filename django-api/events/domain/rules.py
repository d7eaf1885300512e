"""Business rules for event submissions.

Checks are pure functions returning a ``ValidationError`` or ``None``.
``validate`` runs every check so that all violations are reported in a
single pass; ``derive_state`` computes the server-owned flags once a
submission has been accepted.
"""

from collections.abc import Callable

from events.domain.errors import SUBMISSION_OBJECT, ValidationError
from events.domain.models import EventState, EventStatus, EventSubmission

Check = Callable[[EventSubmission], ValidationError | None]


def check_price_order(submission: EventSubmission) -> ValidationError | None:
    """basePrice may not exceed maxPrice when both are set."""
    base, ceiling = submission.base_price, submission.max_price
    if base > 0 and ceiling > 0 and base > ceiling:
        return ValidationError(
            object_name=SUBMISSION_OBJECT,
            code="wrongPrice",
            message="basePrice is wrong",
        )
    return None


def check_end_date(submission: EventSubmission) -> ValidationError | None:
    """endEventAt may not precede any of the other milestones."""
    end = submission.end_event_at
    if (
        end < submission.begin_event_at
        or end < submission.close_enrollment_at
        or end < submission.begin_enrollment_at
    ):
        return ValidationError(
            object_name=SUBMISSION_OBJECT,
            code="wrongValue",
            message="endEventDateTime is wrong",
            field="endEventAt",
            rejected_value=end,
        )
    return None


CHECKS: tuple[Check, ...] = (
    check_price_order,
    check_end_date,
)


def validate(submission: EventSubmission) -> list[ValidationError]:
    """Return every rule violation; an empty list means acceptable."""
    errors = []
    for check in CHECKS:
        error = check(submission)
        if error is not None:
            errors.append(error)
    return errors


def derive_state(submission: EventSubmission) -> EventState:
    """Compute ``free``/``offline`` and the initial status."""
    return EventState(
        free=submission.base_price == 0 and submission.max_price == 0,
        offline=bool(submission.location),
        status=EventStatus.DRAFT,
    )
