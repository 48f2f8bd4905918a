"""Output line templating with ``%title`` and ``%url`` placeholders."""

from __future__ import annotations

import re

# A placeholder followed by an identifier character (``%titles``) is left alone.
_PLACEHOLDER_RE = re.compile(r"%(title|url)(?!\w)")


def render_template(template: str, title: str, url: str) -> str:
    """Substitute *title* and *url* into *template* in a single pass.

    Substituted values are not rescanned, so a title containing ``%url``
    comes through verbatim.
    """
    values = {"title": title, "url": url}
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], template)
