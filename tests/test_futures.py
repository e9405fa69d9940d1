from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading

import pytest

from fallible import fail, from_awaitable, succeed, wrap_async, wrap_concurrent

pytestmark = pytest.mark.unit


# =============================================================================
# asyncio
# =============================================================================


@pytest.mark.asyncio
async def test_wrap_async_succeeds_with_pending_future() -> None:
    future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
    wrapped = wrap_async(future)

    future.set_result("ok")

    assert await wrapped == succeed("ok")


@pytest.mark.asyncio
async def test_wrap_async_failure_completes_wrapped_future_normally() -> None:
    error = ValueError("Something broke!")
    future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
    wrapped = wrap_async(future)

    future.set_exception(error)
    outcome = await wrapped

    assert outcome == fail(error)
    assert wrapped.exception() is None


@pytest.mark.asyncio
async def test_wrap_async_with_already_completed_future() -> None:
    future: asyncio.Future[int] = asyncio.get_running_loop().create_future()
    future.set_result(42)

    assert await wrap_async(future) == succeed(42)


@pytest.mark.asyncio
async def test_wrap_async_accepts_coroutines() -> None:
    async def boom() -> int:
        raise KeyError("missing")

    outcome = await wrap_async(boom())

    assert isinstance(outcome.get_failure(), KeyError)


@pytest.mark.asyncio
async def test_wrap_async_propagates_cancellation() -> None:
    future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
    wrapped = wrap_async(future)

    future.cancel()

    with pytest.raises(asyncio.CancelledError):
        await wrapped
    assert wrapped.cancelled()


@pytest.mark.asyncio
async def test_from_awaitable_captures_value_and_exception() -> None:
    async def value() -> str:
        return "v"

    async def error() -> str:
        raise RuntimeError("e")

    assert await from_awaitable(value()) == succeed("v")
    assert isinstance((await from_awaitable(error())).get_failure(), RuntimeError)


# =============================================================================
# concurrent.futures
# =============================================================================


def test_wrap_concurrent_succeeds_with_pending_future() -> None:
    future: concurrent.futures.Future[str] = concurrent.futures.Future()
    wrapped = wrap_concurrent(future)
    assert not wrapped.done()

    future.set_result("It worked!")

    assert wrapped.result(timeout=1) == succeed("It worked!")


def test_wrap_concurrent_failure_completes_wrapped_future_normally() -> None:
    error = ValueError("Something broke!")
    future: concurrent.futures.Future[str] = concurrent.futures.Future()
    wrapped = wrap_concurrent(future)

    future.set_exception(error)

    assert wrapped.exception(timeout=1) is None
    assert wrapped.result(timeout=1) == fail(error)


def test_wrap_concurrent_with_already_completed_future() -> None:
    future: concurrent.futures.Future[int] = concurrent.futures.Future()
    future.set_result(7)

    wrapped = wrap_concurrent(future)

    assert wrapped.done()
    assert wrapped.result() == succeed(7)


def test_wrap_concurrent_completes_from_worker_thread() -> None:
    gate = threading.Event()

    def work() -> str:
        gate.wait(timeout=5)
        return "done"

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        wrapped = wrap_concurrent(pool.submit(work))
        gate.set()
        assert wrapped.result(timeout=5) == succeed("done")


def test_wrap_concurrent_drops_completion_after_wrapper_cancelled(caplog) -> None:
    future: concurrent.futures.Future[str] = concurrent.futures.Future()
    wrapped = wrap_concurrent(future)

    assert wrapped.cancel()
    with caplog.at_level(logging.ERROR, logger="concurrent.futures"):
        future.set_result("late")

    assert wrapped.cancelled()
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_wrap_concurrent_propagates_cancellation() -> None:
    future: concurrent.futures.Future[str] = concurrent.futures.Future()
    wrapped = wrap_concurrent(future)

    assert future.cancel()

    assert wrapped.cancelled()
