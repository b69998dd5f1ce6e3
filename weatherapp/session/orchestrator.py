"""Weather fetch orchestrator: concurrent weather + forecast retrieval."""

import logging

from weatherapp.api.client import (
    GENERIC_ERROR_MESSAGE,
    ApiError,
    NotFound,
    ServerError,
    WeatherApiClient,
)
from weatherapp.session.concurrency import join_first_failure
from weatherapp.session.events import (
    ErrorDismissed,
    FetchFailed,
    FetchSettled,
    FetchStarted,
    FetchSucceeded,
    HomeRequested,
)
from weatherapp.session.history import HistoryCache
from weatherapp.session.store import SessionStore

logger = logging.getLogger(__name__)


class WeatherFetchOrchestrator:
    def __init__(
        self,
        client: WeatherApiClient,
        store: SessionStore,
        history: HistoryCache | None = None,
    ):
        self.client = client
        self.store = store
        self.history = history
        self._generation = 0
        self._in_flight = 0

    async def fetch_weather_for(self, city: str) -> bool:
        """Fetch current weather and forecast for a city. Returns True on success.

        Both requests are in flight at once; the first failure wins. Results of
        a fetch superseded by a newer fetch or by go_home() are dropped. The
        loading flag is cleared once no fetch remains in flight.
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            self.store.dispatch(FetchStarted(city))
            weather, forecast = await join_first_failure(
                self.client.get_current_weather(city),
                self.client.get_forecast(city),
            )
        except ApiError as e:
            logger.warning("Weather fetch failed for %s: %s", city, e)
            if generation == self._generation:
                self.store.dispatch(FetchFailed(city, _user_message(e)))
            return False
        except Exception:
            logger.exception("Unexpected error fetching weather for %s", city)
            if generation == self._generation:
                self.store.dispatch(FetchFailed(city, GENERIC_ERROR_MESSAGE))
            raise
        else:
            if generation != self._generation:
                logger.info("Discarding superseded weather result for %s", city)
                return False
            self.store.dispatch(FetchSucceeded(city, weather, forecast))
            logger.info("Fetched weather for %s (%d forecast days)", city, len(forecast))
            if self.history is not None:
                self.history.refresh_in_background()
            return True
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self.store.dispatch(FetchSettled(city))

    def go_home(self) -> None:
        """Return to the idle view, dropping any weather result still in flight."""
        self._generation += 1
        self.store.dispatch(HomeRequested())

    def dismiss_error(self) -> None:
        self.store.dispatch(ErrorDismissed())


def _user_message(error: ApiError) -> str:
    """Backend-supplied message for HTTP errors, generic fallback otherwise."""
    if isinstance(error, (NotFound, ServerError)) and error.status_code is not None:
        return error.message
    return GENERIC_ERROR_MESSAGE
