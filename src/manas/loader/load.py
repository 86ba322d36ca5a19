"""
Scraping pipeline for the Manas canteen and buffet pages.

Responsibilities:
- `fetch`: downloads a page and flattens it into heading tokens
- `reconstruct`: turns the token stream into menus (see src/manas/reconstruct)
- `convert`: wraps menus with metadata into the published JSON layout
- `store`: replaces the published documents on disk

Main functions:
- scrape_canteen() / scrape_buffet(): one page -> one JSON document (nothing written)
- scrape_all(): scrape the selected pages concurrently, then write them all

A page that fails to load aborts the run before any document is written.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Iterable

from httpx import AsyncClient

from src.manas.config import CATEGORY_TITLES_RU, ScraperConfig
from src.manas.loader.convert import buffet_to_json, canteen_to_json
from src.manas.loader.fetch import fetch_headings
from src.manas.loader.store import LAST_UPDATED_FORMAT, DocumentSpec, JsonDocumentStore
from src.manas.models.menu import BuffetMeta, CanteenMeta
from src.manas.reconstruct.buffet import reconstruct_buffet
from src.manas.reconstruct.canteen import reconstruct_canteen


class Page:

    canteen = 'canteen'
    buffet = 'buffet'

    all = (canteen, buffet)


def format_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(LAST_UPDATED_FORMAT)


def build_meta(config: ScraperConfig, page: str, now: datetime | None = None) -> CanteenMeta | BuffetMeta:
    last_updated = format_timestamp(now)
    if page == Page.canteen:
        return CanteenMeta(timezone=config.timezone, source=config.source, last_updated=last_updated)
    if page == Page.buffet:
        return BuffetMeta(timezone=config.timezone, currency=config.currency, last_updated=last_updated)
    raise ValueError(f"Unknown page '{page}'")


def document_store(config: ScraperConfig, page: str) -> JsonDocumentStore:
    path = config.canteen_path if page == Page.canteen else config.buffet_path
    return JsonDocumentStore(DocumentSpec(path=path))


async def scrape_canteen(client: AsyncClient, config: ScraperConfig) -> dict:
    tokens = await fetch_headings(client, config.canteen_url, config.canteen_levels)
    menu = reconstruct_canteen(tokens)
    return canteen_to_json(menu, build_meta(config, Page.canteen))


async def scrape_buffet(client: AsyncClient, config: ScraperConfig) -> dict:
    tokens = await fetch_headings(client, config.buffet_url, config.buffet_levels)
    menu = reconstruct_buffet(tokens, CATEGORY_TITLES_RU, config.buffet_levels)
    return buffet_to_json(menu, build_meta(config, Page.buffet))


async def scrape_all(
        client: AsyncClient,
        config: ScraperConfig,
        freshness_hours: float = 0,
        only: Iterable[str] | None = None,
) -> list[str]:
    """Scrape the selected pages and write their documents; return the written paths."""
    scrapers = {
        Page.canteen: scrape_canteen,
        Page.buffet: scrape_buffet,
    }
    pages = [page for page in Page.all if only is None or page in only]

    stale: list[str] = []
    for page in pages:
        store = document_store(config, page)
        if store.is_fresh(freshness_hours):
            logging.info("%s is fresher than %sh; skipping %s", store.path, freshness_hours, page)
            continue
        stale.append(page)

    bodies = await asyncio.gather(*(scrapers[page](client, config) for page in stale))

    written: list[str] = []
    for page, body in zip(stale, bodies):
        path = document_store(config, page).write(body)
        logging.info("Wrote %s", path)
        written.append(path)
    return written
