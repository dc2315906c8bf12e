"""Walking a paged result set forward."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from protocols.pagination import LinkFollower
    from schemas.responses import PagedResponse


def iter_pages(
    client: LinkFollower,
    first: PagedResponse,
    *,
    max_pages: int | None = None,
) -> Iterator[PagedResponse]:
    """Yield ``first`` and every page after it until ``next`` runs out.

    Hitting the API depth limit raises DepthLimitExceeded from the
    generator; pages already yielded stay valid.
    """
    page: PagedResponse | None = first
    count = 0
    while page is not None:
        yield page
        count += 1
        if max_pages is not None and count >= max_pages:
            return
        page = page.next_page(client)
