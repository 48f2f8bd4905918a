"""URL → title resolution."""

from __future__ import annotations

import logging

import httpx

from .client import fetch_html
from .extract import extract_title
from .models import TitleResult

logger = logging.getLogger(__name__)


async def resolve(url: str, client: httpx.AsyncClient | None = None) -> TitleResult:
    """Fetch *url* and extract its title. :class:`FetchError` propagates."""
    html = await fetch_html(url, client)
    title = extract_title(html)
    logger.debug("resolved", extra={"url": url, "title": (title or "")[:80]})
    return TitleResult(url=url, title=title)
