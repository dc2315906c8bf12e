"""Pagination protocol: anything that can turn a HAL link into a page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schemas.responses import Link, PagedResponse


@runtime_checkable
class LinkFollower(Protocol):
    """Any class that can fetch the page a link points at."""

    def follow_link(self, link: Link) -> PagedResponse: ...
