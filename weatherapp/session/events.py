"""Events accepted by the session reducer."""

from dataclasses import dataclass
from datetime import datetime

from weatherapp.models.history import HistoryEntry
from weatherapp.models.weather import CurrentWeather, ForecastSeries


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class SuggestionsArrived:
    query: str  # the query the request was issued for
    suggestions: tuple[str, ...]


@dataclass(frozen=True)
class SuggestionsFailed:
    query: str


@dataclass(frozen=True)
class CitySelected:
    city: str


@dataclass(frozen=True)
class FetchStarted:
    city: str


@dataclass(frozen=True)
class FetchSucceeded:
    city: str
    weather: CurrentWeather
    forecast: ForecastSeries


@dataclass(frozen=True)
class FetchFailed:
    city: str
    message: str


@dataclass(frozen=True)
class FetchSettled:
    city: str


@dataclass(frozen=True)
class HistoryLoaded:
    entries: tuple[HistoryEntry, ...]


@dataclass(frozen=True)
class HistoryCleared:
    pass


@dataclass(frozen=True)
class HistoryPanelToggled:
    pass


@dataclass(frozen=True)
class HistoryPanelClosed:
    pass


@dataclass(frozen=True)
class ErrorDismissed:
    pass


@dataclass(frozen=True)
class HomeRequested:
    pass


@dataclass(frozen=True)
class ThemeToggled:
    pass


@dataclass(frozen=True)
class ClockTicked:
    now: datetime


SessionEvent = (
    QueryChanged
    | SuggestionsArrived
    | SuggestionsFailed
    | CitySelected
    | FetchStarted
    | FetchSucceeded
    | FetchFailed
    | FetchSettled
    | HistoryLoaded
    | HistoryCleared
    | HistoryPanelToggled
    | HistoryPanelClosed
    | ErrorDismissed
    | HomeRequested
    | ThemeToggled
    | ClockTicked
)
