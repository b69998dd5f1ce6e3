"""Session clock: a one-second tick that keeps SessionState.now current."""

import asyncio
import contextlib
import logging
from collections.abc import Callable
from datetime import datetime

from weatherapp.session.events import ClockTicked
from weatherapp.session.store import SessionStore

logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class SessionClock:
    def __init__(
        self,
        store: SessionStore,
        tick_seconds: float = 1.0,
        now: Callable[[], datetime] = _local_now,
    ):
        self.store = store
        self.tick_seconds = tick_seconds
        self._now = now
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking. Calling start() on a running clock does nothing."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.debug("Clock started (every %.1fs)", self.tick_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.debug("Clock stopped")

    async def _run(self) -> None:
        while True:
            self.store.dispatch(ClockTicked(self._now()))
            await asyncio.sleep(self.tick_seconds)
