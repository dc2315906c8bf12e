"""Ticketmaster Discovery API client: GET, status check, JSON decode."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from discovery.errors import DecodeError, DiscoveryError, NetworkError, UnexpectedStatus
from discovery.urls import (
    apply_query_params,
    endpoint_url,
    parse_base_url,
    redact_url,
    resolve_link,
)
from observability.logger import get_logger
from schemas.client import ClientConfig
from schemas.observability import RequestRecord
from schemas.query import QueryParams
from schemas.responses import Document, Link, PagedResponse

if TYPE_CHECKING:
    from config.settings import Settings
    from observability.metrics import MetricsCollector

log = get_logger(__name__)


class DiscoveryClient:
    """Synchronous Discovery API client. Implements LinkFollower protocol.

    Every call opens its own short-lived ``httpx.Client`` so the response
    and its connection are released whatever the outcome. Nothing is
    retried: transport, status and decode failures surface immediately as
    ``DiscoveryError`` subclasses.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = parse_base_url(self.config.api_url)
        self.metrics = metrics
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        metrics: MetricsCollector | None = None,
    ) -> DiscoveryClient:
        return cls(settings.client_config(), metrics=metrics)

    def events_url(self) -> httpx.URL:
        return endpoint_url(self.base_url, "events", self.config.key)

    def venues_url(self) -> httpx.URL:
        return endpoint_url(self.base_url, "venues", self.config.key)

    def _finish(self, record: RequestRecord, start: float, error: DiscoveryError | None = None) -> None:
        record.latency_ms = round((time.perf_counter() - start) * 1000, 2)
        if error is not None:
            record.success = False
            record.error_code = error.error_code or ""
        if self.metrics is not None:
            self.metrics.record(record)

    def _get(self, url: httpx.URL) -> httpx.Response:
        safe_url = redact_url(url)
        record = RequestRecord(url=safe_url)
        log.info("discovery.request", url=safe_url, request_id=record.request_id)
        start = time.perf_counter()

        try:
            with httpx.Client(transport=self._transport, timeout=self.config.timeout) as http:
                resp = http.get(url)
        except httpx.DecodingError as e:
            # Corrupt Content-Encoding: a response arrived but its body is unreadable.
            log.warning("discovery.decode.failed", url=safe_url, error=str(e))
            error = DecodeError(f"Response body could not be decoded: {e}")
            self._finish(record, start, error)
            raise error from e
        except httpx.TransportError as e:
            log.warning("discovery.request.failed", url=safe_url, error=str(e))
            error = NetworkError(f"GET {safe_url} failed: {e}")
            self._finish(record, start, error)
            raise error from e

        record.status_code = resp.status_code
        log.info("discovery.response", url=safe_url, status_code=resp.status_code)
        if resp.status_code != httpx.codes.OK:
            log.warning(
                "discovery.response.unexpected_status",
                url=safe_url,
                status_code=resp.status_code,
            )
            error = UnexpectedStatus(resp.status_code, resp.text)
            self._finish(record, start, error)
            raise error

        self._finish(record, start)
        return resp

    def fetch_document(self, url: httpx.URL) -> Document:
        """GET ``url`` and decode the body as a free-form JSON object."""
        resp = self._get(url)
        try:
            document = resp.json()
        except ValueError as e:
            log.warning("discovery.decode.failed", url=redact_url(url), error=str(e))
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            log.warning("discovery.decode.failed", url=redact_url(url), error="not an object")
            raise DecodeError(f"Expected a JSON object, got {type(document).__name__}")
        return document

    def fetch_page(self, url: httpx.URL) -> PagedResponse:
        """GET ``url`` and decode the body into a PagedResponse."""
        resp = self._get(url)
        try:
            page = PagedResponse.model_validate_json(resp.content)
        except ValidationError as e:
            log.warning("discovery.decode.failed", url=redact_url(url), error=str(e))
            raise DecodeError(f"Response is not a valid paged response: {e}") from e

        log.info(
            "discovery.page.decoded",
            number=page.page.number,
            size=page.page.size,
            total_pages=page.page.total_pages,
            has_next=page.has_next,
        )
        return page

    def get_event(self, event_id: str) -> Document:
        """Event details by ID.

        See: https://developer.ticketmaster.com/products-and-docs/apis/discovery-api/v2/#event-details-v2
        """
        return self.fetch_document(endpoint_url(self.events_url(), event_id, self.config.key))

    def search_events(self, params: QueryParams | None = None) -> PagedResponse:
        """Events matching the given filters."""
        url = apply_query_params(self.events_url(), params or QueryParams(), self.config.key)
        return self.fetch_page(url)

    def search_venues(self, params: QueryParams | None = None) -> PagedResponse:
        """Venues matching the given filters."""
        url = apply_query_params(self.venues_url(), params or QueryParams(), self.config.key)
        return self.fetch_page(url)

    def follow_link(self, link: Link) -> PagedResponse:
        return self.fetch_page(resolve_link(self.base_url, link, self.config.key))
