"""Tests for next/previous page navigation and the depth guard."""

from __future__ import annotations

import httpx
import pytest
from respx import MockRouter

from discovery.errors import DepthLimitExceeded
from discovery.pagination import iter_pages
from protocols.pagination import LinkFollower
from schemas.responses import MAX_PAGE_DEPTH, Link, PagedResponse
from factories import API_KEY, paged_body, url_pattern


def _page(**kwargs) -> PagedResponse:
    return PagedResponse.model_validate(paged_body(**kwargs))


def test_client_is_a_link_follower(client):
    assert isinstance(client, LinkFollower)


def test_next_page_none_without_link(client, respx_mock: MockRouter):
    respx_mock.get(url_pattern("/events")).mock(
        return_value=httpx.Response(200, json=paged_body(prev_href="/discovery/v2/events?page=0&size=20"))
    )
    first = client.search_events()

    assert first.next_page(client) is None
    assert len(respx_mock.calls) == 1


def test_previous_page_none_without_link(client):
    assert _page(next_href="/discovery/v2/events?page=1&size=20").previous_page(client) is None


def test_next_page_follows_link(client, sample_events, respx_mock: MockRouter):
    route = respx_mock.get(url_pattern("/events")).mock(
        return_value=httpx.Response(
            200,
            json=paged_body(number=1, events=sample_events[1:], prev_href="/discovery/v2/events?page=0&size=20"),
        )
    )
    first = _page(number=0, next_href="/discovery/v2/events?page=1&size=20{&sort}")

    second = first.next_page(client)

    assert second is not None
    assert second.page.number == 1
    assert second.embedded.events[0]["name"] == "Symphony No. 9"
    sent = route.calls.last.request.url
    assert sent.params["page"] == "1"
    assert sent.params["apikey"] == API_KEY
    assert "{" not in str(sent)


def test_previous_page_follows_link(client, respx_mock: MockRouter):
    route = respx_mock.get(url_pattern("/events")).mock(
        return_value=httpx.Response(200, json=paged_body(number=0, next_href="/discovery/v2/events?page=1&size=20"))
    )
    second = _page(number=1, prev_href="/discovery/v2/events?page=0&size=20")

    first = second.previous_page(client)

    assert first is not None
    assert first.page.number == 0
    assert route.calls.last.request.url.params["page"] == "0"


@pytest.mark.parametrize("direction", ["next_page", "previous_page"])
def test_depth_limit_blocks_navigation(client, direction, respx_mock: MockRouter):
    page = _page(
        size=20,
        number=50,
        total_elements=5000,
        next_href="/discovery/v2/events?page=51&size=20",
        prev_href="/discovery/v2/events?page=49&size=20",
    )

    with pytest.raises(DepthLimitExceeded) as exc:
        getattr(page, direction)(client)

    assert exc.value.depth == MAX_PAGE_DEPTH
    assert "1000" in str(exc.value)
    assert len(respx_mock.calls) == 0


def test_depth_guard_applies_even_without_link(client):
    with pytest.raises(DepthLimitExceeded):
        _page(size=200, number=5).next_page(client)


def test_just_below_depth_limit_is_allowed(client, respx_mock: MockRouter):
    respx_mock.get(url_pattern("/events")).mock(
        return_value=httpx.Response(200, json=paged_body(size=20, number=50, total_elements=5000))
    )
    page = _page(size=20, number=49, total_elements=5000, next_href="/discovery/v2/events?page=50&size=20")

    nxt = page.next_page(client)

    assert nxt is not None
    assert nxt.depth == 1000
    with pytest.raises(DepthLimitExceeded):
        nxt.next_page(client)


def test_iter_pages_walks_until_last(client, sample_events, respx_mock: MockRouter):
    route = respx_mock.get(url_pattern("/events")).mock(
        side_effect=[
            httpx.Response(200, json=paged_body(number=1, events=sample_events[1:], next_href="/discovery/v2/events?page=2&size=20")),
            httpx.Response(200, json=paged_body(number=2, events=[])),
        ]
    )
    first = _page(number=0, events=sample_events[:1], next_href="/discovery/v2/events?page=1&size=20")

    pages = list(iter_pages(client, first))

    assert [p.page.number for p in pages] == [0, 1, 2]
    assert [r.request.url.params["page"] for r in route.calls] == ["1", "2"]


def test_iter_pages_respects_max_pages(client, respx_mock: MockRouter):
    respx_mock.get(url_pattern("/events")).mock(
        return_value=httpx.Response(200, json=paged_body(number=1, next_href="/discovery/v2/events?page=2&size=20"))
    )
    first = _page(number=0, next_href="/discovery/v2/events?page=1&size=20")

    pages = list(iter_pages(client, first, max_pages=2))

    assert len(pages) == 2
    assert len(respx_mock.calls) == 1


def test_iter_pages_surfaces_depth_limit(client):
    first = _page(size=100, number=10, next_href="/discovery/v2/events?page=11&size=100")
    pages = iter_pages(client, first)

    assert next(pages) is first
    with pytest.raises(DepthLimitExceeded):
        next(pages)


class _RecordingFollower:
    def __init__(self, response: PagedResponse) -> None:
        self.response = response
        self.links: list[Link] = []

    def follow_link(self, link: Link) -> PagedResponse:
        self.links.append(link)
        return self.response


def test_navigation_only_needs_a_link_follower():
    last = _page(number=1)
    follower = _RecordingFollower(last)
    first = _page(number=0, next_href="/discovery/v2/events?page=1&size=20")

    assert first.next_page(follower) is last
    assert follower.links == [first.links.next]
