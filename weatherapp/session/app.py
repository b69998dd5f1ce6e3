"""WeatherSession: wires client, store, controller, orchestrator, history and clock."""

import logging

from weatherapp.api.client import WeatherApiClient
from weatherapp.chart.projector import project_forecast
from weatherapp.config.schema import AppConfig
from weatherapp.models.chart import ChartLayout
from weatherapp.models.history import HistoryEntry
from weatherapp.models.session import SessionState
from weatherapp.session.clock import SessionClock
from weatherapp.session.controller import SearchSessionController
from weatherapp.session.events import ThemeToggled
from weatherapp.session.history import HistoryCache
from weatherapp.session.orchestrator import WeatherFetchOrchestrator
from weatherapp.session.store import SessionStore

logger = logging.getLogger(__name__)


class WeatherSession:
    """One user session against the weather backend.

    start() begins the clock and loads history in the background; stop()
    cancels both and closes the HTTP client if the session created it.
    """

    def __init__(self, config: AppConfig, client: WeatherApiClient | None = None):
        self.config = config
        self._owns_client = client is None
        self.client = client or WeatherApiClient(
            base_url=config.api.base_url,
            timeout=config.api.timeout_seconds,
        )
        self.store = SessionStore()
        self.history = HistoryCache(self.client, self.store)
        self.orchestrator = WeatherFetchOrchestrator(self.client, self.store, self.history)
        self.controller = SearchSessionController(
            self.client,
            self.store,
            self.orchestrator,
            self.history,
            debounce_seconds=config.search.debounce_ms / 1000,
        )
        self.clock = SessionClock(self.store, config.clock.tick_seconds)

    async def __aenter__(self) -> "WeatherSession":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def start(self) -> None:
        logger.info("Session started against %s", self.config.api.base_url)
        self.clock.start()
        self.history.refresh_in_background()

    async def stop(self) -> None:
        await self.clock.stop()
        await self.history.cancel_pending()
        if self._owns_client:
            await self.client.aclose()
        logger.info("Session stopped")

    @property
    def state(self) -> SessionState:
        return self.store.state

    # --- User actions ---

    async def type_query(self, text: str) -> None:
        await self.controller.on_query_changed(text)

    async def search(self, text: str) -> bool:
        return await self.controller.submit(text)

    async def select_history(self, entry: HistoryEntry) -> bool:
        return await self.controller.select_history(entry)

    async def clear_history(self) -> bool:
        return await self.history.clear()

    def toggle_history_panel(self) -> None:
        self.history.toggle_panel()

    def go_home(self) -> None:
        self.orchestrator.go_home()

    def dismiss_error(self) -> None:
        self.orchestrator.dismiss_error()

    def toggle_theme(self) -> None:
        self.store.dispatch(ThemeToggled())

    def chart(self) -> ChartLayout:
        return project_forecast(self.state.forecast)
