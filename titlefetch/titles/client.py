"""Shared HTTP client and page fetching."""

from __future__ import annotations

import logging

import httpx

from titlefetch.config import DEFAULT_USER_AGENT
from titlefetch.errors import FetchError

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def build_client(
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = 30.0,
    max_connections: int = 10,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build an ``httpx.AsyncClient`` sized for *max_connections* concurrent fetches."""
    return httpx.AsyncClient(
        follow_redirects=True,
        headers={"User-Agent": user_agent},
        timeout=timeout,
        limits=httpx.Limits(max_connections=max_connections),
        transport=transport,
    )


def configure_client(**kwargs) -> httpx.AsyncClient:
    """Build the process-wide client with explicit options.

    Raises ``RuntimeError`` if the client already exists; it is never rebuilt.
    """
    global _client
    if _client is not None:
        raise RuntimeError("HTTP client is already initialised")
    _client = build_client(**kwargs)
    return _client


def get_client() -> httpx.AsyncClient:
    """Return the process-wide client, building it with defaults on first use."""
    global _client
    if _client is None:
        logger.debug("building default http client")
        _client = build_client()
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def fetch_html(url: str, client: httpx.AsyncClient | None = None) -> str:
    """GET *url* and return the body as text, whatever the status code.

    Error pages usually still carry a ``<title>``, so 4xx/5xx responses are
    returned like any other. Transport and decoding failures raise
    :class:`FetchError`.
    """
    http = client if client is not None else get_client()
    try:
        resp = await http.get(url)
        html = resp.text
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError, LookupError) as exc:
        logger.debug("fetch failed", extra={"url": url, "error": repr(exc)})
        raise FetchError(url) from exc

    if resp.is_error:
        logger.debug(
            "non-success status, parsing body anyway",
            extra={"url": url, "status_code": resp.status_code},
        )
    logger.debug("fetched", extra={"url": url, "status_code": resp.status_code, "length": len(html)})
    return html
