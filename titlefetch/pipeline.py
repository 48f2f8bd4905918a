"""Bounded concurrent pipeline: resolves URLs with at most N fetches in flight."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections import deque
from collections.abc import AsyncGenerator, Awaitable, Callable, Iterable
from typing import IO, TypeVar

import httpx

from titlefetch.config import DEFAULT_FALLBACK_TITLE, DEFAULT_TEMPLATE
from titlefetch.errors import FetchError
from titlefetch.template import render_template
from titlefetch.titles import TitleResult, resolve

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def buffered(
    factories: Iterable[Callable[[], Awaitable[T]]],
    limit: int,
) -> AsyncGenerator[T, None]:
    """Run awaitables from *factories* with at most *limit* active, yielding in input order.

    *factories* is consumed lazily: the next one is called as soon as any
    active task finishes. Results that finish early are held until everything
    before them has been yielded. The head-of-line exception propagates, an
    error raised while pulling the next factory surfaces in that position,
    and whenever the generator stops early every pending task is cancelled.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")

    queue: deque[asyncio.Future[T]] = deque()
    source = iter(factories)
    exhausted = False
    closing = False
    active = 0

    def start_next() -> None:
        nonlocal exhausted, active
        while not exhausted and active < limit:
            try:
                factory = next(source)
                task = asyncio.ensure_future(factory())
            except StopIteration:
                exhausted = True
                return
            except Exception as exc:
                # Runs inside done callbacks too; queue the failure in its
                # input position so the consumer raises it in order.
                exhausted = True
                failed: asyncio.Future[T] = asyncio.get_running_loop().create_future()
                failed.set_exception(exc)
                queue.append(failed)
                return
            active += 1
            task.add_done_callback(on_done)
            queue.append(task)

    def on_done(_: asyncio.Future[T]) -> None:
        nonlocal active
        active -= 1
        if not closing:
            start_next()

    try:
        start_next()
        while queue:
            head = queue[0]
            await asyncio.wait((head,))
            queue.popleft()
            yield head.result()
    finally:
        closing = True
        for task in queue:
            task.cancel()
        if queue:
            logger.debug("cancelling pending tasks", extra={"count": len(queue)})
            await asyncio.gather(*queue, return_exceptions=True)


def resolve_all(
    urls: Iterable[str],
    concurrency: int = 10,
    client: httpx.AsyncClient | None = None,
) -> AsyncGenerator[TitleResult, None]:
    """Resolve every URL with at most *concurrency* fetches in flight, in input order."""

    def factory(url: str) -> Callable[[], Awaitable[TitleResult]]:
        return lambda: resolve(url, client)

    return buffered((factory(url) for url in urls), concurrency)


async def _resolve_isolated(url: str, client: httpx.AsyncClient | None) -> TitleResult | FetchError:
    try:
        return await resolve(url, client)
    except FetchError as exc:
        return exc


async def run(
    urls: Iterable[str],
    *,
    template: str = DEFAULT_TEMPLATE,
    skip_when_no_title: bool = False,
    fallback_title: str = DEFAULT_FALLBACK_TITLE,
    concurrency: int = 10,
    keep_going: bool = False,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Resolve *urls* and write one rendered line per URL to *out*.

    Missing titles are reported on *err* and rendered with *fallback_title*,
    or skipped when *skip_when_no_title* is set. The first :class:`FetchError`
    aborts the run unless *keep_going* is set, in which case the failure is
    reported and the run continues. Returns the number of failed URLs.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if keep_going:
        results: AsyncGenerator[TitleResult | FetchError, None] = buffered(
            ((lambda url=url: _resolve_isolated(url, client)) for url in urls),
            concurrency,
        )
    else:
        results = resolve_all(urls, concurrency, client)

    emitted = 0
    failed = 0
    try:
        async for result in results:
            if isinstance(result, FetchError):
                failed += 1
                cause = result.__cause__ or result
                err.write(f"(failed to fetch `{result.url}`: {cause})\n")
                err.flush()
                continue

            title = result.title
            if title is None:
                err.write(f"(no title for `{result.url}`)\n")
                err.flush()
                if skip_when_no_title:
                    continue
                title = fallback_title

            out.write(render_template(template, title, result.url) + "\n")
            out.flush()
            emitted += 1
    finally:
        await results.aclose()

    logger.info("run complete", extra={"lines": emitted, "failed": failed})
    return failed
