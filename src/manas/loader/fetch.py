"""
Fetching menu pages and flattening them into heading streams.

- `fetch_html`: GET a page with the scraper's User-Agent, fail on non-2xx
- `extract_headings`: walk the requested heading levels in document order
- `fetch_headings`: both of the above; an empty stream is treated as a broken page
"""
import logging
from typing import Iterable

import httpx
from bs4 import BeautifulSoup
from httpx import AsyncClient

from src.manas.config import ScraperConfig
from src.manas.models.menu import HeadingToken


class PageParseError(RuntimeError):
    def __init__(self, url: str, message: str):
        super().__init__(f"url={url}: {message}")
        self.url = url


def build_client(config: ScraperConfig, **kwargs) -> AsyncClient:
    """Create the shared HTTP client; extra kwargs go to `httpx.AsyncClient` (e.g. `transport`)."""
    return httpx.AsyncClient(
        headers={"User-Agent": config.user_agent},
        timeout=config.timeout_sec,
        follow_redirects=True,
        **kwargs,
    )


async def fetch_html(client: AsyncClient, url: str) -> str:
    logging.info("Calling %s", url)
    response = await client.get(url)
    logging.info("%s <- status=%s bytes=%s", url, response.status_code, len(response.content))
    response.raise_for_status()
    return response.text


def extract_headings(html: str, levels: Iterable[int]) -> list[HeadingToken]:
    """Return the headings of the given levels in document order, text trimmed."""
    tags = [f"h{level}" for level in sorted(set(levels))]
    soup = BeautifulSoup(html, "html.parser")
    return [
        HeadingToken(level=int(heading.name[1]), text=heading.get_text().strip())
        for heading in soup.find_all(tags)
    ]


async def fetch_headings(client: AsyncClient, url: str, levels: Iterable[int]) -> list[HeadingToken]:
    levels = list(levels)
    tokens = extract_headings(await fetch_html(client, url), levels)
    if not tokens:
        raise PageParseError(url, f"no h{'/h'.join(map(str, levels))} headings found")
    logging.info("Extracted %s headings from %s", len(tokens), url)
    return tokens
