"""Join combinator for concurrent backend calls."""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def join_first_failure(*aws: Awaitable[Any]) -> tuple[Any, ...]:
    """Run awaitables concurrently and return their results in order.

    All of them are scheduled before any is awaited. The first exception wins:
    the remaining tasks are cancelled, their late results discarded, and that
    exception is raised. Cancelling the caller cancels every task.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and not task.cancelled() and task.exception() is not None:
                raise task.exception()  # type: ignore[misc]
        return tuple(task.result() for task in tasks)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
