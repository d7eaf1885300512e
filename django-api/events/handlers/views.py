"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from collections.abc import Iterable

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import ValidationError
from events.domain.errors import DomainError, ErrorCode
from events.handlers.hal import (
    HalPagination,
    event_resource,
    event_url,
    events_url,
    index_url,
    link,
    profile_link,
)
from events.handlers.serializers import (
    EventSubmissionSerializer,
    ValidationErrorSerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_PAGE_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def bad_request(request: Request, errors: Iterable[ValidationError]) -> Response:
    """400 body listing every error plus a link back to the API index."""
    return Response(
        {
            "errors": ValidationErrorSerializer(list(errors), many=True).data,
            "_links": {"index": link(index_url(request))},
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class IndexView(APIView):
    """Handler for GET /api"""

    def get(self, request: Request) -> Response:
        return Response({"_links": {"events": link(events_url(request))}})


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        paginator = HalPagination()
        try:
            page = get_event_service().list_events(paginator.get_page_request(request))
        except DomainError as exc:
            return domain_error_response(exc)

        items = [event_resource(request, event) for event in page.items]
        data = paginator.get_paginated_data(request, page, items)
        data["_links"]["profile"] = profile_link("list")
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            return bad_request(request, serializer.collect_errors())

        result = get_event_service().create_event(serializer.to_submission())
        if not result.ok:
            return bad_request(request, result.errors)

        location = event_url(request, result.event)
        data = event_resource(
            request,
            result.event,
            **{
                "query-events": link(events_url(request)),
                "update-event": link(location),
                "profile": profile_link("create"),
            },
        )
        return Response(data, status=status.HTTP_201_CREATED, headers={"Location": location})


class EventDetailView(APIView):
    """Handler for GET/PUT /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().get_event(event_id)
        except DomainError as exc:
            return domain_error_response(exc)

        return Response(event_resource(request, event, profile=profile_link("get")))

    def put(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        try:
            existing = service.get_event(event_id)
        except DomainError as exc:
            return domain_error_response(exc)

        serializer = EventSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            return bad_request(request, serializer.collect_errors())

        result = service.update_event(existing, serializer.to_submission())
        if not result.ok:
            return bad_request(request, result.errors)

        return Response(
            event_resource(request, result.event, profile=profile_link("update"))
        )
