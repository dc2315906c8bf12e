"""URL construction for the Discovery API.

Everything here is pure: URLs in, URLs out. The API key travels as the
``apikey`` query parameter, so anything that logs a URL must go through
``redact_url`` first.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from discovery.errors import InvalidURL

if TYPE_CHECKING:
    from schemas.query import QueryParams
    from schemas.responses import Link

API_KEY_PARAM = "apikey"
REDACTED = "REDACTED"

# RFC 6570 expressions, e.g. "{&sort}" on templated HAL links
_TEMPLATE_EXPR = re.compile(r"\{[^}]*\}")


def parse_base_url(url: str | httpx.URL) -> httpx.URL:
    """Parse an absolute http(s) URL, raising InvalidURL otherwise."""
    try:
        parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURL(str(url), str(e)) from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURL(str(url), "expected an absolute http(s) URL")
    return parsed


def _set_params(url: httpx.URL, overrides: Mapping[str, str]) -> httpx.URL:
    # Existing params survive unless overridden; output is sorted by name.
    items = [(k, v) for k, v in url.params.multi_items() if k not in overrides]
    items.extend(overrides.items())
    return url.copy_with(params=sorted(items))


def _same_origin(a: httpx.URL, b: httpx.URL) -> bool:
    return (a.scheme, a.host, a.port) == (b.scheme, b.host, b.port)


def endpoint_url(base: str | httpx.URL, segment: str, api_key: str = "") -> httpx.URL:
    """Append a path segment to ``base`` and attach the API key if one is set."""
    url = parse_base_url(base)
    segment = segment.strip("/")
    if not segment:
        raise InvalidURL(str(url), "empty path segment")

    path = f"{url.path.rstrip('/')}/{quote(segment, safe='')}"
    try:
        url = url.copy_with(path=path)
    except httpx.InvalidURL as e:
        raise InvalidURL(path, str(e)) from e

    if not api_key:
        return url
    return _set_params(url, {API_KEY_PARAM: api_key})


def apply_query_params(
    url: str | httpx.URL,
    params: QueryParams,
    api_key: str = "",
) -> httpx.URL:
    """Serialize the non-empty filters of ``params`` onto ``url``."""
    overrides = params.to_wire()
    if api_key:
        overrides[API_KEY_PARAM] = api_key
    return _set_params(parse_base_url(url), overrides)


def resolve_link(base: str | httpx.URL, link: Link, api_key: str = "") -> httpx.URL:
    """Resolve a server-supplied (usually relative) link against ``base``.

    Templated links have their template expressions dropped, leaving the
    concrete query the server already filled in. The API key is only
    attached when the link stays on the base URL's origin.
    """
    href = link.href
    if link.templated:
        href = _TEMPLATE_EXPR.sub("", href)
    if not href:
        raise InvalidURL(link.href, "empty link")

    base_url = parse_base_url(base)
    try:
        url = base_url.join(href)
    except httpx.InvalidURL as e:
        raise InvalidURL(href, str(e)) from e

    if not api_key or not _same_origin(base_url, url):
        return url
    return _set_params(url, {API_KEY_PARAM: api_key})


def redact_url(url: str | httpx.URL) -> str:
    """Mask the API key so the URL can be logged.

    URLs without an ``apikey`` parameter come back unchanged.
    """
    try:
        parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURL(str(url), str(e)) from e

    if API_KEY_PARAM not in parsed.params:
        return str(url)
    return str(parsed.copy_set_param(API_KEY_PARAM, REDACTED))
