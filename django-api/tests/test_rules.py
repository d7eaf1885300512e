"""Unit tests for submission validation and derived state.

Run with: pytest tests/test_rules.py -v
"""

from datetime import datetime

import pytest

from events.domain import EventState, EventStatus
from events.domain.rules import derive_state, validate


def codes(errors):
    return [error.code for error in errors]


class TestValidate:
    """Tests for rules.validate."""

    def test_valid_submission_has_no_errors(self, make_submission):
        """A consistent submission passes."""
        assert validate(make_submission(base_price=100, max_price=200)) == []

    def test_base_price_above_max_price(self, make_submission):
        """basePrice > maxPrice > 0 is reported as wrongPrice."""
        errors = validate(make_submission(base_price=10000, max_price=200))

        assert codes(errors) == ["wrongPrice"]
        assert errors[0].object_name == "submission"
        assert errors[0].message == "basePrice is wrong"
        assert errors[0].is_global

    @pytest.mark.parametrize(
        "base_price, max_price",
        [(100, 0), (0, 100), (0, 0), (200, 200)],
    )
    def test_price_order_only_checked_when_both_set(
        self, make_submission, base_price, max_price
    ):
        """A zero price on either side means unlimited or free, not an error."""
        assert validate(make_submission(base_price=base_price, max_price=max_price)) == []

    def test_end_before_begin_event(self, make_submission):
        """endEventAt before beginEventAt is reported on endEventAt."""
        end = datetime(2018, 11, 23, 14, 21)
        errors = validate(
            make_submission(
                begin_enrollment_at=datetime(2018, 11, 20, 14, 21),
                close_enrollment_at=datetime(2018, 11, 21, 14, 21),
                begin_event_at=datetime(2018, 11, 25, 14, 21),
                end_event_at=end,
            )
        )

        assert codes(errors) == ["wrongValue"]
        assert errors[0].field == "endEventAt"
        assert errors[0].message == "endEventDateTime is wrong"
        assert errors[0].rejected_value == end

    @pytest.mark.parametrize(
        "milestone", ["close_enrollment_at", "begin_enrollment_at"]
    )
    def test_end_before_enrollment_milestones(self, make_submission, milestone):
        """endEventAt may not precede either enrollment date."""
        dates = {
            "begin_enrollment_at": datetime(2018, 10, 1),
            "close_enrollment_at": datetime(2018, 10, 2),
            "begin_event_at": datetime(2018, 11, 1),
            "end_event_at": datetime(2018, 11, 2),
        }
        dates[milestone] = datetime(2018, 11, 3)
        submission = make_submission(**dates)

        assert codes(validate(submission)) == ["wrongValue"]

    def test_end_equal_to_begin_is_allowed(self, make_submission):
        moment = datetime(2018, 11, 25, 14, 21)
        assert validate(make_submission(begin_event_at=moment, end_event_at=moment)) == []

    def test_every_violation_reported_in_one_pass(self, make_submission):
        """Both rules are evaluated even when the first fails."""
        errors = validate(
            make_submission(
                base_price=10000,
                max_price=200,
                begin_enrollment_at=datetime(2018, 11, 26, 14, 21),
                close_enrollment_at=datetime(2018, 11, 25, 14, 21),
                begin_event_at=datetime(2018, 11, 25, 14, 21),
                end_event_at=datetime(2018, 11, 23, 14, 21),
            )
        )

        assert codes(errors) == ["wrongPrice", "wrongValue"]
        assert errors[1].field == "endEventAt"

    def test_validate_is_deterministic(self, make_submission):
        submission = make_submission(base_price=5, max_price=1)
        assert validate(submission) == validate(submission)


class TestDeriveState:
    """Tests for rules.derive_state."""

    @pytest.mark.parametrize(
        "base_price, max_price, free",
        [(0, 0, True), (100, 0, False), (0, 1000, False), (100, 200, False)],
    )
    def test_free(self, make_submission, base_price, max_price, free):
        """An event is free only when both prices are zero."""
        state = derive_state(make_submission(base_price=base_price, max_price=max_price))
        assert state.free is free

    @pytest.mark.parametrize(
        "location, offline",
        [("Gangnam station", True), (None, False), ("", False)],
    )
    def test_offline(self, make_submission, location, offline):
        """An event is offline only when it has a location."""
        assert derive_state(make_submission(location=location)).offline is offline

    def test_status_starts_as_draft(self, make_submission):
        assert derive_state(make_submission()).status is EventStatus.DRAFT

    def test_free_online_submission(self, make_submission):
        """Zero prices and no location: acceptable, free and online."""
        submission = make_submission(base_price=0, max_price=0, location=None)

        assert validate(submission) == []
        assert derive_state(submission) == EventState(
            free=True, offline=False, status=EventStatus.DRAFT
        )

    def test_derive_state_is_idempotent(self, make_submission):
        submission = make_submission(base_price=10, max_price=20, location="Seoul")
        assert derive_state(submission) == derive_state(submission)
