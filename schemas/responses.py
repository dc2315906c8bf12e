"""Response envelopes returned by the Discovery API list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from discovery.errors import DepthLimitExceeded

if TYPE_CHECKING:
    from protocols.pagination import LinkFollower

# Deepest result the API will page into, measured as size * number.
MAX_PAGE_DEPTH = 1000

Document = dict[str, Any]


class Link(BaseModel):
    """HAL link to another resource; ``templated`` marks RFC 6570 hrefs."""

    href: str = ""
    templated: bool = False


class Links(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_link: Link = Field(default_factory=Link, alias="self")
    next: Link = Field(default_factory=Link)
    prev: Link = Field(default_factory=Link)


class Page(BaseModel):
    """Pagination metadata for the current page."""

    model_config = ConfigDict(populate_by_name=True)

    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")
    number: int = 0


class EmbeddedResponse(BaseModel):
    """Result collections from the ``_embedded`` field.

    Items stay as plain JSON objects; their schema belongs to the API.
    """

    events: list[Document] = Field(default_factory=list)
    venues: list[Document] = Field(default_factory=list)
    attractions: list[Document] = Field(default_factory=list)
    classifications: list[Document] = Field(default_factory=list)


class PagedResponse(BaseModel):
    """A page of results, navigable with next_page() / previous_page()."""

    model_config = ConfigDict(populate_by_name=True)

    links: Links = Field(default_factory=Links, alias="_links")
    page: Page = Field(default_factory=Page)
    embedded: EmbeddedResponse = Field(default_factory=EmbeddedResponse, alias="_embedded")

    @property
    def depth(self) -> int:
        return self.page.size * self.page.number

    @property
    def has_next(self) -> bool:
        return bool(self.links.next.href)

    @property
    def has_prev(self) -> bool:
        return bool(self.links.prev.href)

    def _check_depth(self) -> None:
        if self.depth >= MAX_PAGE_DEPTH:
            raise DepthLimitExceeded(self.depth)

    def next_page(self, client: LinkFollower) -> PagedResponse | None:
        """Fetch the following page, or None when this is the last one."""
        self._check_depth()
        if not self.has_next:
            return None
        return client.follow_link(self.links.next)

    def previous_page(self, client: LinkFollower) -> PagedResponse | None:
        """Fetch the preceding page, or None when this is the first one."""
        self._check_depth()
        if not self.has_prev:
            return None
        return client.follow_link(self.links.prev)
