"""History cache: best-effort client-side mirror of backend search history."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from weatherapp.api.client import ApiError, WeatherApiClient
from weatherapp.models.history import HistoryEntry
from weatherapp.session.events import (
    HistoryCleared,
    HistoryLoaded,
    HistoryPanelClosed,
    HistoryPanelToggled,
)
from weatherapp.session.store import SessionStore

logger = logging.getLogger(__name__)


class HistoryCache:
    def __init__(self, client: WeatherApiClient, store: SessionStore):
        self.client = client
        self.store = store
        self._generation = 0
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return self.store.state.history

    async def refresh(self) -> bool:
        """Replace the local history with the backend's list.

        Best-effort: backend failures are logged and never surfaced. A result
        that arrives after a newer refresh or a clear was requested is dropped.
        """
        return await self._refresh(self._next_generation())

    def refresh_in_background(self) -> "asyncio.Task[bool]":
        """Start a detached refresh; the caller does not wait for it."""
        task = asyncio.create_task(self._refresh(self._next_generation()))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _refresh(self, generation: int) -> bool:
        try:
            entries = await self.client.get_history()
        except ApiError as e:
            logger.warning("Failed to refresh search history: %s", e)
            return False

        if generation != self._generation:
            logger.debug("Dropping stale history refresh")
            return False
        self.store.dispatch(HistoryLoaded(tuple(entries)))
        return True

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    async def drain(self) -> None:
        """Wait for background refreshes started so far."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def cancel_pending(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def clear(self) -> bool:
        """Delete history on the backend, then empty the local list.

        The local list is left untouched when the delete fails.
        """
        try:
            await self.client.clear_history()
        except ApiError as e:
            logger.warning("Failed to clear search history: %s", e)
            return False

        self._next_generation()
        self.store.dispatch(HistoryCleared())
        return True

    def toggle_panel(self) -> None:
        self.store.dispatch(HistoryPanelToggled())

    def close_panel(self) -> None:
        self.store.dispatch(HistoryPanelClosed())

    async def select(
        self, entry: HistoryEntry, submit: Callable[[str], Awaitable[bool]]
    ) -> bool:
        """Close the panel and search for the entry's city like a fresh submission."""
        self.close_panel()
        return await submit(entry.city)
