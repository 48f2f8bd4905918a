"""Fake pages served through httpx.MockTransport."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx

FAIL = object()


@dataclass
class Page:
    body: str
    status_code: int = 200
    delay: float = 0.0


def html_page(title: str | None, delay: float = 0.0, status_code: int = 200) -> Page:
    head = f"<title>{title}</title>" if title is not None else ""
    return Page(
        body=f"<html><head>{head}</head><body><p>hi</p></body></html>",
        status_code=status_code,
        delay=delay,
    )


def make_transport(pages: dict, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """Serve *pages* keyed by host; ``FAIL`` makes that host refuse the connection."""

    async def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        page = pages[request.url.host]
        if page is FAIL:
            raise httpx.ConnectError("connection refused", request=request)
        if page.delay:
            await asyncio.sleep(page.delay)
        return httpx.Response(
            page.status_code,
            text=page.body,
            headers={"Content-Type": "text/html; charset=utf-8"},
        )

    return httpx.MockTransport(handler)
