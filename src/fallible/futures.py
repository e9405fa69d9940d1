"""Bridges from futures and awaitables into Outcomes.

Each bridge moves the future's failure channel into the Outcome: the wrapped
future always completes with a result, and that result is a ``Failure`` when
the source raised. Cancellation is not a failure; it propagates to the
wrapped future unchanged.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import TYPE_CHECKING

from fallible.outcome import Failure, Outcome, from_result

if TYPE_CHECKING:
    from collections.abc import Awaitable

__all__ = ["from_awaitable", "wrap_async", "wrap_concurrent"]

log = logging.getLogger(__name__)


async def from_awaitable[T](aw: Awaitable[T]) -> Outcome[T]:
    """Await *aw* and capture its result or exception as an Outcome."""
    try:
        result = await aw
    except Exception as exc:
        return Failure(exc)
    return from_result(result)


def wrap_async[T](aw: Awaitable[T]) -> asyncio.Future[Outcome[T]]:
    """Return a future that resolves to the Outcome of *aw*.

    For an ``asyncio.Future`` input the task is scheduled on that future's
    loop, so this may be called before the loop is running. Any other
    awaitable requires a running loop.
    """
    if isinstance(aw, asyncio.Future):
        loop = aw.get_loop()
    else:
        loop = asyncio.get_running_loop()
    task = loop.create_task(from_awaitable(aw))
    task.add_done_callback(_log_cancelled)
    return task


def _log_cancelled(fut: asyncio.Future[object]) -> None:
    if fut.cancelled():
        log.debug("Source awaitable was cancelled; wrapped future cancelled")


def wrap_concurrent[T](
    future: concurrent.futures.Future[T],
) -> concurrent.futures.Future[Outcome[T]]:
    """Return a thread-safe future that resolves to the Outcome of *future*.

    The result is set from whichever thread completes *future*, or
    immediately if it is already done. Cancelling the returned future
    leaves *future* running; its eventual completion is discarded.
    """
    wrapped: concurrent.futures.Future[Outcome[T]] = concurrent.futures.Future()

    def _relay(src: concurrent.futures.Future[T]) -> None:
        if src.cancelled():
            log.debug("Source future was cancelled; cancelling wrapped future")
            wrapped.cancel()
            return
        if not wrapped.set_running_or_notify_cancel():
            log.debug("Wrapped future was cancelled; dropping source completion")
            return
        exc = src.exception()
        if isinstance(exc, Exception):
            wrapped.set_result(Failure(exc))
        elif exc is not None:
            # BaseException outside Exception is not captured
            wrapped.set_exception(exc)
        else:
            wrapped.set_result(from_result(src.result()))

    future.add_done_callback(_relay)
    return wrapped

