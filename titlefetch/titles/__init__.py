"""Title resolution submodule: fetch a page, pull out its ``<title>``."""

from __future__ import annotations

from .client import build_client, close_client, configure_client, fetch_html, get_client
from .extract import extract_title
from .models import TitleResult
from .resolver import resolve

__all__ = [
    "TitleResult",
    "build_client",
    "close_client",
    "configure_client",
    "extract_title",
    "fetch_html",
    "get_client",
    "resolve",
]
