"""Reading URL lists from a file or standard input."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

from titlefetch.errors import InputError

logger = logging.getLogger(__name__)


def parse_urls(contents: str) -> list[str]:
    """Split *contents* into trimmed, non-blank lines, keeping order and duplicates."""
    return [line.strip() for line in contents.splitlines() if line.strip()]


def read_source(path: str | Path | None = None, stdin: IO[str] | None = None) -> str:
    """Read the whole URL source; ``None`` or ``"-"`` means standard input."""
    if path is None or str(path) == "-":
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError("standard input") from exc

    try:
        contents = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"`{path}`") from exc
    logger.debug("loaded input file", extra={"path": str(path), "length": len(contents)})
    return contents


def load_urls(path: str | Path | None = None, stdin: IO[str] | None = None) -> list[str]:
    urls = parse_urls(read_source(path, stdin))
    logger.debug("parsed urls", extra={"url_count": len(urls)})
    return urls
