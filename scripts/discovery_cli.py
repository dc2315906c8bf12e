"""Command line access to the Discovery API.

Usage:
    python -m scripts.discovery_cli events search --keyword jazz --country-code US
    python -m scripts.discovery_cli events search --size 50 --pages 3
    python -m scripts.discovery_cli events get vvG1zZ4pJ3xKoQ
    python -m scripts.discovery_cli venues search --keyword arena

Configuration comes from the environment (DISCOVERY_API_KEY, DISCOVERY_API_URL, ...).
"""

from __future__ import annotations

import json
from collections.abc import Callable

import click
from rich.console import Console
from rich.table import Table

from config.settings import get_settings
from discovery.client import DiscoveryClient
from discovery.errors import DepthLimitExceeded, DiscoveryError
from discovery.pagination import iter_pages
from observability.logger import get_logger, setup_logging
from observability.metrics import MetricsCollector
from schemas.query import QueryParams
from schemas.responses import Document, PagedResponse

console = Console()
log = get_logger(__name__)


def _dig(doc: Document, *path: str | int, default: str = "") -> str:
    node: object = doc
    for step in path:
        try:
            node = node[step]  # type: ignore[index]
        except (KeyError, IndexError, TypeError):
            return default
    return str(node)


def _event_row(event: Document) -> tuple[str, ...]:
    return (
        _dig(event, "id"),
        _dig(event, "name"),
        _dig(event, "dates", "start", "localDate"),
        _dig(event, "_embedded", "venues", 0, "name"),
    )


def _venue_row(venue: Document) -> tuple[str, ...]:
    return (
        _dig(venue, "id"),
        _dig(venue, "name"),
        _dig(venue, "city", "name"),
        _dig(venue, "country", "countryCode"),
    )


def _collect(
    client: DiscoveryClient,
    first: PagedResponse,
    pages: int,
    pick: Callable[[PagedResponse], list[Document]],
) -> tuple[list[Document], PagedResponse]:
    items: list[Document] = []
    last = first
    try:
        for page in iter_pages(client, first, max_pages=pages):
            items.extend(pick(page))
            last = page
    except DepthLimitExceeded as e:
        console.print(f"[yellow]{e.message}, stopping here.[/yellow]")
    return items, last


def _print_table(
    title: str,
    columns: tuple[str, ...],
    rows: list[tuple[str, ...]],
    last: PagedResponse,
) -> None:
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, style="cyan" if col == "ID" else None)
    for row in rows:
        table.add_row(*row)
    console.print(table)
    console.print(
        f"[dim]page {last.page.number + 1}/{last.page.total_pages} · "
        f"{last.page.total_elements} total[/dim]"
    )


def _report(client: DiscoveryClient) -> None:
    if client.metrics is not None:
        log.info("cli.requests", **client.metrics.summary())


def _build_client() -> DiscoveryClient:
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)
    if not settings.has_api_key:
        log.warning("cli.api_key.missing")
    return DiscoveryClient.from_settings(settings, metrics=MetricsCollector())


_search_options = [
    click.option("--keyword", "-k", default="", help="Full text search."),
    click.option("--country-code", default="", help="ISO country code, e.g. US."),
    click.option("--state-code", default="", help="State code, e.g. NY."),
    click.option("--sort", default="", help="Sort order, e.g. date,asc."),
    click.option("--size", default="", help="Page size."),
    click.option("--latlong", default="", help="Lat,long to search around."),
    click.option("--radius", default="", help="Radius around --latlong."),
    click.option("--unit", default="", help="Radius unit: miles or km."),
    click.option("--pages", "-p", default=1, show_default=True, help="Pages to fetch."),
]


def search_options(func):
    for option in reversed(_search_options):
        func = option(func)
    return func


@click.group()
def cli() -> None:
    """Ticketmaster Discovery API."""


@cli.group()
def events() -> None:
    """Event search and lookup."""


@cli.group()
def venues() -> None:
    """Venue search."""


@events.command("search")
@search_options
@click.option("--classification-name", default="", help="Segment/genre name, e.g. music.")
@click.option("--start-date-time", default="", help="ISO-8601, e.g. 2026-01-01T00:00:00Z.")
@click.option("--end-date-time", default="", help="ISO-8601 upper bound.")
@click.option("--venue-id", default="", help="Only events at this venue.")
def search_events(pages: int, **filters: str) -> None:
    """Search events and print them as a table."""
    client = _build_client()
    try:
        first = client.search_events(QueryParams(**filters))
        items, last = _collect(client, first, pages, lambda p: p.embedded.events)
    except DiscoveryError as e:
        raise click.ClickException(e.message) from e

    _report(client)
    _print_table("Events", ("ID", "Name", "Date", "Venue"), [_event_row(e) for e in items], last)


@events.command("get")
@click.argument("event_id")
def get_event(event_id: str) -> None:
    """Print the full JSON document of one event."""
    client = _build_client()
    try:
        document = client.get_event(event_id)
    except DiscoveryError as e:
        raise click.ClickException(e.message) from e
    _report(client)
    console.print_json(json.dumps(document))


@venues.command("search")
@search_options
def search_venues(pages: int, **filters: str) -> None:
    """Search venues and print them as a table."""
    client = _build_client()
    try:
        first = client.search_venues(QueryParams(**filters))
        items, last = _collect(client, first, pages, lambda p: p.embedded.venues)
    except DiscoveryError as e:
        raise click.ClickException(e.message) from e

    _report(client)
    _print_table("Venues", ("ID", "Name", "City", "Country"), [_venue_row(v) for v in items], last)


if __name__ == "__main__":
    cli()
