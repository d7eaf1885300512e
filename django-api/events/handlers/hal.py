"""HAL representation helpers: link relations, event resources and paging.

Responses carry their navigation under ``_links`` as
``{"<rel>": {"href": "<uri>"}}`` and page contents under ``_embedded``.
"""

from typing import Any

from django.conf import settings
from django.urls import reverse
from rest_framework.request import Request
from rest_framework.utils.urls import replace_query_param

from events.domain import Event, Page, PageRequest, SortOrder
from events.domain.errors import InvalidPageRequestError
from events.handlers.serializers import EventSerializer

PROFILE_URL = "/docs/index.html#resources-events-{section}"


def link(href: str) -> dict[str, str]:
    return {"href": href}


def profile_link(section: str) -> dict[str, str]:
    return link(PROFILE_URL.format(section=section))


def index_url(request: Request) -> str:
    return request.build_absolute_uri(reverse("index"))


def events_url(request: Request) -> str:
    return request.build_absolute_uri(reverse("event-list"))


def event_url(request: Request, event: Event) -> str:
    return request.build_absolute_uri(
        reverse("event-detail", kwargs={"event_id": str(event.id)})
    )


def event_resource(
    request: Request, event: Event, **links: dict[str, str]
) -> dict[str, Any]:
    """Serialize an event with its ``self`` link plus any extra relations."""
    data = dict(EventSerializer(event).data)
    data["_links"] = {"self": link(event_url(request, event)), **links}
    return data


class HalPagination:
    """Zero-based ``page``/``size``/``sort`` paging over the event store."""

    page_query_param = "page"
    page_size_query_param = "size"
    sort_query_param = "sort"
    embedded_rel = "eventList"

    def get_page_request(self, request: Request) -> PageRequest:
        params = request.query_params
        page = self._parse_int(params, self.page_query_param, 0)
        size = self._parse_int(params, self.page_size_query_param, self.default_size)
        sort: tuple[SortOrder, ...] = ()
        for value in params.getlist(self.sort_query_param):
            sort += SortOrder.parse(value)
        try:
            return PageRequest(page=page, size=min(size, self.max_size), sort=sort)
        except ValueError as exc:
            raise InvalidPageRequestError(str(exc)) from exc

    def get_paginated_data(
        self, request: Request, page: Page[Event], items: list[dict[str, Any]]
    ) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if items:
            data["_embedded"] = {self.embedded_rel: items}
        data["_links"] = self.get_links(request, page)
        data["page"] = {
            "size": page.size,
            "totalElements": page.total_elements,
            "totalPages": page.total_pages,
            "number": page.number,
        }
        return data

    def get_links(self, request: Request, page: Page[Event]) -> dict[str, Any]:
        last = max(page.total_pages - 1, 0)
        links = {"first": link(self._page_url(request, page, 0))}
        if page.has_previous:
            links["prev"] = link(self._page_url(request, page, page.number - 1))
        links["self"] = link(self._page_url(request, page, page.number))
        if page.has_next:
            links["next"] = link(self._page_url(request, page, page.number + 1))
        links["last"] = link(self._page_url(request, page, last))
        return links

    @property
    def default_size(self) -> int:
        return getattr(settings, "EVENTS_PAGE_SIZE", 20)

    @property
    def max_size(self) -> int:
        return getattr(settings, "EVENTS_MAX_PAGE_SIZE", 2000)

    def _page_url(self, request: Request, page: Page[Event], number: int) -> str:
        url = request.build_absolute_uri()
        url = replace_query_param(url, self.page_query_param, number)
        return replace_query_param(url, self.page_size_query_param, page.size)

    @staticmethod
    def _parse_int(params: Any, name: str, default: int) -> int:
        raw = params.get(name)
        if raw in (None, ""):
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidPageRequestError(f"{name} must be an integer") from exc
