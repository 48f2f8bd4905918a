"""Command-line entrypoint: print a templated line with the title of each URL."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import IO, Sequence

from pydantic import ValidationError

from titlefetch.config import Settings, get_settings
from titlefetch.errors import TitleFetchError
from titlefetch.logging_config import setup_logging
from titlefetch.pipeline import run
from titlefetch.sources import load_urls
from titlefetch.titles import close_client, configure_client

logger = logging.getLogger(__name__)


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="titlefetch",
        description="Fetch each URL and print its <title> through a template.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File that contains the URLs, one per line. Reads standard input if omitted or '-'.",
    )
    parser.add_argument(
        "-t", "--template",
        default=defaults.template,
        help="Output template. Use %%title and %%url as placeholders (default: %(default)r).",
    )
    parser.add_argument(
        "-s", "--skip-when-no-title",
        action=argparse.BooleanOptionalAction,
        default=defaults.skip_when_no_title,
        help="Print nothing for pages without a title instead of the fallback.",
    )
    parser.add_argument(
        "--fallback-title",
        default=defaults.fallback_title,
        help="Title used for pages without one (default: %(default)r).",
    )
    parser.add_argument(
        "-k", "--keep-going",
        action=argparse.BooleanOptionalAction,
        default=defaults.keep_going,
        help="Report failed URLs and continue instead of stopping at the first one.",
    )
    parser.add_argument(
        "-j", "--concurrency",
        type=int,
        default=defaults.concurrency,
        help="Maximum number of pages fetched at once (default: %(default)s).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=defaults.timeout,
        help="Per-request timeout in seconds (default: %(default)s).",
    )
    parser.add_argument(
        "--user-agent",
        default=defaults.user_agent,
        help="User-Agent header sent with every request (default: %(default)r).",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        help="Logging level for diagnostics on stderr (default: %(default)s).",
    )
    parser.add_argument(
        "--log-json",
        action=argparse.BooleanOptionalAction,
        default=defaults.log_json,
        help="Emit log records as JSON on stderr.",
    )
    return parser


def report_error(exc: BaseException, err: IO[str]) -> None:
    """Write *exc* and its ``__cause__`` chain to *err*."""
    err.write(f"error: {exc}\n")
    cause = exc.__cause__
    while cause is not None:
        err.write(f"  caused by: {cause}\n")
        cause = cause.__cause__
    err.flush()


async def _run(urls: list[str], settings: Settings) -> int:
    client = configure_client(
        user_agent=settings.user_agent,
        timeout=settings.timeout,
        max_connections=settings.concurrency,
    )
    try:
        return await run(
            urls,
            template=settings.template,
            skip_when_no_title=settings.skip_when_no_title,
            fallback_title=settings.fallback_title,
            concurrency=settings.concurrency,
            keep_going=settings.keep_going,
            client=client,
        )
    finally:
        await close_client()


def main(argv: Sequence[str] | None = None) -> int:
    try:
        defaults = get_settings()
    except ValidationError as exc:
        report_error(exc, sys.stderr)
        return 2

    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    options = {name: value for name, value in vars(args).items() if name in Settings.model_fields}
    try:
        settings = Settings(**options)
    except ValidationError as exc:
        parser.error(str(exc))

    setup_logging(settings.log_level, settings.log_json)
    logger.debug("starting", extra={"concurrency": settings.concurrency, "file": args.file})

    try:
        urls = load_urls(args.file)
        failed = asyncio.run(_run(urls, settings))
    except TitleFetchError as exc:
        report_error(exc, sys.stderr)
        return 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
