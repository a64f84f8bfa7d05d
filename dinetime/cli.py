"""Command line interface for pulling DineTime data."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import typer

from .client import DineTimeClient
from .config import load_config
from .contracts import PageCursor
from .errors import DineTimeError
from .pagination import (
    TABLE_EVENTS,
    TABLE_HISTORY,
    TEAM_MEMBER_EVENTS,
    VISIT_UPDATES,
    CollectionSpec,
)
from .persistence import checkpoint_key, get_repository

logger = logging.getLogger(__name__)

app = typer.Typer(help="CLI for the DineTime Enterprise API")

checkpoint_app = typer.Typer(help="Commands for managing sync checkpoints")
app.add_typer(checkpoint_app, name="checkpoint")


class Collection(str, Enum):
    TEAM_MEMBER_EVENTS = "team-member-events"
    TABLE_HISTORY = "table-history"
    TABLE_EVENTS = "table-events"
    VISITS = "visits"


_COLLECTIONS: Dict[Collection, Tuple[CollectionSpec, str]] = {
    Collection.TEAM_MEMBER_EVENTS: (TEAM_MEMBER_EVENTS, "/Site/{site_uid}/TeamMembers/Events"),
    Collection.TABLE_HISTORY: (TABLE_HISTORY, "/Site/{site_uid}/Tables/History"),
    Collection.TABLE_EVENTS: (TABLE_EVENTS, "/Site/{site_uid}/Tables/Events"),
    Collection.VISITS: (VISIT_UPDATES, "/Site/{site_uid}/Visits"),
}


def _collection_request(
    collection: Collection, site_uid: str
) -> Tuple[CollectionSpec, str, Dict[str, Any]]:
    spec, path = _COLLECTIONS[collection]
    params = {"SiteUID": site_uid} if collection is Collection.VISITS else {}
    return spec, path.format(site_uid=site_uid), params


def _build_client() -> DineTimeClient:
    return DineTimeClient(config=load_config())


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, default=str))


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except DineTimeError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """DineTime CLI entry point."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("sites")
def sites() -> None:
    """
    List the active sites of the configured company.

    Example:
        dinetime sites
    """

    async def _list() -> Any:
        async with _build_client() as client:
            return await client.sites.get_company_sites()

    for site in _run(_list()) or []:
        _echo_json(site)


@app.command("site")
def site(site_uid: str) -> None:
    """Show one site."""

    async def _get() -> Any:
        async with _build_client() as client:
            return await client.sites.get_site(site_uid)

    _echo_json(_run(_get()))


@app.command("events")
def events(
    collection: Collection,
    site_uid: str,
    start: datetime = typer.Option(..., help="Start of the update window (UTC)"),
    end: datetime = typer.Option(..., help="End of the update window (UTC)"),
    max_pages: int = typer.Option(0, min=0, help="Stop after this many pages; 0 fetches all"),
) -> None:
    """
    Print every record of a collection updated within a time window.

    Records are printed as JSON lines, oldest update first.

    Example:
        dinetime events table-events SITE_UID --start 2024-01-01 --end 2024-01-02
    """
    spec, path, params = _collection_request(collection, site_uid)
    cursor = PageCursor.create(start, end, max_pages)

    async def _walk() -> None:
        async with _build_client() as client:
            async for item in client.iter_items(spec, path, cursor, params):
                _echo_json(item)

    _run(_walk())


@app.command("sync")
def sync(
    collection: Collection,
    site_uid: str,
    end: datetime = typer.Option(..., help="End of the update window (UTC)"),
    start: Optional[datetime] = typer.Option(
        None, help="Start of the window when no checkpoint exists yet (UTC)"
    ),
    max_pages: int = typer.Option(0, min=0, help="Stop after this many pages; 0 fetches all"),
) -> None:
    """
    Print new records of a collection since the last sync.

    Resumes from the stored checkpoint for the collection and site, and
    stores the cutoff of every page as it is printed.

    Example:
        dinetime sync visits SITE_UID --start 2024-01-01 --end 2024-02-01
    """
    spec, path, params = _collection_request(collection, site_uid)
    key = checkpoint_key(collection.value, site_uid)
    repo = get_repository()

    async def _sync() -> int:
        checkpoint = await repo.get_checkpoint(key)
        window_start: datetime | str | None = checkpoint.cutoff if checkpoint else start
        if window_start is None:
            typer.secho(
                f"No checkpoint for {key}; pass --start for the first sync",
                fg=typer.colors.RED,
            )
            raise typer.Exit(code=1)

        count = 0
        cursor = PageCursor.create(window_start, end, max_pages)
        async with _build_client() as client:
            async for page in client.iter_pages(spec, path, cursor, params):
                for item in page.items:
                    _echo_json(item)
                count += len(page.items)
                if page.cutoff is not None:
                    await repo.save_checkpoint(key, page.cutoff)
        return count

    try:
        count = _run(_sync())
    finally:
        repo.close()
    logger.info(f"Synced {count} records for {key}")


@checkpoint_app.command("list")
def checkpoint_list() -> None:
    """List stored sync checkpoints."""
    repo = get_repository()
    try:
        checkpoints = asyncio.run(repo.list_checkpoints())
    finally:
        repo.close()
    if not checkpoints:
        typer.echo("No checkpoints found")
        return
    for checkpoint in checkpoints:
        typer.echo(f"{checkpoint.key}\t{checkpoint.cutoff}\t{checkpoint.updated_at}")


if __name__ == "__main__":
    app()
