"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from rest_framework.test import APIClient

from events.domain import EventSubmission


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payload() -> dict:
    """A valid JSON submission for POST/PUT /api/events."""
    return {
        "name": "Spring",
        "description": "REST API Development with Spring",
        "beginEnrollmentAt": "2018-11-23T14:21",
        "closeEnrollmentAt": "2018-11-24T14:21",
        "beginEventAt": "2018-11-25T14:21",
        "endEventAt": "2018-11-26T14:21",
        "basePrice": 100,
        "maxPrice": 200,
        "limitOfEnrollment": 100,
        "location": "Gangnam D2 Startup Factory",
    }


def _submission(**overrides) -> EventSubmission:
    fields = {
        "name": "Spring",
        "description": "REST API Development with Spring",
        "begin_enrollment_at": datetime(2018, 11, 23, 14, 21),
        "close_enrollment_at": datetime(2018, 11, 24, 14, 21),
        "begin_event_at": datetime(2018, 11, 25, 14, 21),
        "end_event_at": datetime(2018, 11, 26, 14, 21),
        "location": None,
        "base_price": 0,
        "max_price": 0,
        "limit_of_enrollment": 100,
    }
    fields.update(overrides)
    return EventSubmission(**fields)


@pytest.fixture
def make_submission():
    """Build an EventSubmission; keyword arguments override the defaults."""
    return _submission
