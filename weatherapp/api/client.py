"""Async client for the city weather backend (search, weather, forecast, history)."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from weatherapp.models.history import HistoryEntry, parse_history
from weatherapp.models.weather import (
    CurrentWeather,
    ForecastSeries,
    parse_current_weather,
    parse_forecast,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 10.0
GENERIC_ERROR_MESSAGE = "Could not fetch weather data. Please select a valid city."


class ApiError(Exception):
    """Raised when the weather backend cannot satisfy a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(ApiError):
    """Transport or connectivity failure, including timeouts."""


class NotFound(ApiError):
    """The backend reports no matching city."""


class ServerError(ApiError):
    """Non-2xx response other than 404, or an unreadable body."""


class WeatherApiClient:
    """Thin async wrapper around the backend's REST endpoints.

    One httpx.AsyncClient is shared by all calls so concurrent requests reuse
    the connection pool. Use as an async context manager or call aclose().
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "WeatherApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self, method: str, endpoint: str, params: dict[str, str] | None = None
    ) -> httpx.Response:
        url = f"{self.base_url}{endpoint}"
        try:
            resp = await self._http.request(method, url, params=params)
        except httpx.RequestError as e:
            logger.error("Weather API request failed: %s %s -> %s", method, endpoint, e)
            raise NetworkError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning(
                "Weather API %d: %s %s -> %s", resp.status_code, method, endpoint, message
            )
            if resp.status_code == 404:
                raise NotFound(message, resp.status_code)
            raise ServerError(message, resp.status_code)
        return resp

    async def _get_json(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        resp = await self._request("GET", endpoint, params=params)
        try:
            return resp.json()
        except ValueError as e:
            raise ServerError(f"Invalid JSON from {endpoint}: {e}") from e

    # --- Cities ---

    async def search_cities(self, prefix: str) -> list[str]:
        """Return city names matching a prefix. Never send an empty prefix."""
        if not prefix:
            raise ValueError("search prefix must not be empty")
        data = await self._get_json("/cities/search", params={"q": prefix})
        return [str(c) for c in data] if isinstance(data, list) else []

    # --- Weather ---

    async def get_current_weather(self, city: str) -> CurrentWeather:
        data = await self._get_json(f"/weather/{_path(city)}")
        try:
            return parse_current_weather(data)
        except (KeyError, TypeError, ValueError, IndexError, AttributeError) as e:
            raise ServerError(f"Unexpected weather payload for {city!r}: {e}") from e

    async def get_forecast(self, city: str) -> ForecastSeries:
        data = await self._get_json(f"/forecast/{_path(city)}")
        try:
            return parse_forecast(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ServerError(f"Unexpected forecast payload for {city!r}: {e}") from e

    # --- History ---

    async def get_history(self) -> list[HistoryEntry]:
        data = await self._get_json("/history")
        try:
            return parse_history(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise ServerError(f"Unexpected history payload: {e}") from e

    async def clear_history(self) -> None:
        await self._request("DELETE", "/history")


def _path(city: str) -> str:
    return quote(city, safe="")


def _error_message(resp: httpx.Response) -> str:
    """Backend-supplied `message` field, or the generic fallback."""
    try:
        body = resp.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return GENERIC_ERROR_MESSAGE
