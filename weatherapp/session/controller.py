"""Search session controller: query text, suggestions, and selection."""

import asyncio
import logging

from weatherapp.api.client import ApiError, WeatherApiClient
from weatherapp.models.history import HistoryEntry
from weatherapp.models.session import SearchPhase
from weatherapp.session.events import (
    CitySelected,
    QueryChanged,
    SuggestionsArrived,
    SuggestionsFailed,
)
from weatherapp.session.history import HistoryCache
from weatherapp.session.orchestrator import WeatherFetchOrchestrator
from weatherapp.session.store import SessionStore

logger = logging.getLogger(__name__)


class SearchSessionController:
    """Drives the Idle -> Suggesting -> Selected search flow.

    Suggestion responses are tagged with the query they were issued for and
    are applied only while that query is still the live one, so a slow
    response for "Mu" never overwrites the suggestions for "Mumb".
    """

    def __init__(
        self,
        client: WeatherApiClient,
        store: SessionStore,
        orchestrator: WeatherFetchOrchestrator,
        history: HistoryCache,
        debounce_seconds: float = 0.0,
    ):
        self.client = client
        self.store = store
        self.orchestrator = orchestrator
        self.history = history
        self.debounce_seconds = debounce_seconds

    async def on_query_changed(self, text: str) -> None:
        self.store.dispatch(QueryChanged(text))
        if not text:
            return

        if self.debounce_seconds > 0:
            await asyncio.sleep(self.debounce_seconds)
        if not self._is_live(text):
            logger.debug("Query %r superseded before search was sent", text)
            return

        try:
            suggestions = await self.client.search_cities(text)
        except ApiError as e:
            logger.warning("Suggestion fetch failed for %r: %s", text, e)
            self.store.dispatch(SuggestionsFailed(text))
            return
        self.store.dispatch(SuggestionsArrived(text, tuple(suggestions)))

    async def clear_query(self) -> None:
        await self.on_query_changed("")

    async def submit(self, text: str) -> bool:
        """Search for the trimmed text. Blank input is a no-op."""
        city = text.strip()
        if not city:
            return False
        self.store.dispatch(CitySelected(city))
        return await self.orchestrator.fetch_weather_for(city)

    async def select_suggestion(self, city: str) -> bool:
        return await self.submit(city)

    async def select_history(self, entry: HistoryEntry) -> bool:
        return await self.history.select(entry, self.submit)

    def _is_live(self, query: str) -> bool:
        state = self.store.state
        return state.phase == SearchPhase.SUGGESTING and state.query == query
