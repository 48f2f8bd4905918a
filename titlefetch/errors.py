"""Exception hierarchy for titlefetch."""

from __future__ import annotations


class TitleFetchError(Exception):
    """Base class for errors that abort a run."""


class InputError(TitleFetchError):
    """The URL source could not be opened, read or decoded."""

    def __init__(self, source: str) -> None:
        super().__init__(f"failed to load input from {source}")
        self.source = source


class FetchError(TitleFetchError):
    """An HTTP GET for a single URL failed."""

    def __init__(self, url: str) -> None:
        super().__init__(f"failed to get: `{url}`")
        self.url = url
