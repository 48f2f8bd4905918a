"""Data models for the titles submodule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TitleResult:
    """Resolved title for one URL; ``title`` is ``None`` when missing or blank."""

    url: str
    title: str | None = None
