"""HTML ``<title>`` extraction."""

from __future__ import annotations

import re
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

_RAW_TITLE_RE = re.compile(r"<title\b[^>]*>(.*?)</title\s*>", re.IGNORECASE | re.DOTALL)


def _text_nodes(element: Tag, html: str) -> Iterator[str]:
    # HTML5 parsers keep markup inside <title> as raw text. Split it back into
    # nodes only when the source really holds a tag there; unescaped entities
    # such as &lt;br&gt; must stay literal.
    if element.find(True) is None:
        raw = _RAW_TITLE_RE.search(html)
        if raw is not None and "<" in raw.group(1):
            yield from BeautifulSoup(raw.group(1), "html.parser").strings
            return
    yield from element.strings


def extract_title(html: str) -> str | None:
    """Return the text of the first ``<title>`` element, or ``None``.

    Every text node under the element is stripped and the non-empty pieces
    are joined with a single space, so ``<title>Hello <b>World</b></title>``
    yields ``"Hello World"``. A missing tag and a blank one both give ``None``.
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.select_one("title")
    if element is None:
        return None

    title = " ".join(part for part in (text.strip() for text in _text_nodes(element, html)) if part)
    return title or None
