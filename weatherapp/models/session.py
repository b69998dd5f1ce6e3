"""Session state: one immutable snapshot of everything the UI shows."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from weatherapp.models.history import HistoryEntry
from weatherapp.models.weather import CurrentWeather, ForecastSeries


class SearchPhase(StrEnum):
    IDLE = "idle"
    SUGGESTING = "suggesting"
    SELECTED = "selected"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class SessionState:
    query: str = ""
    suggestions: tuple[str, ...] = ()
    phase: SearchPhase = SearchPhase.IDLE
    current_weather: CurrentWeather | None = None
    forecast: ForecastSeries = ()
    history: tuple[HistoryEntry, ...] = ()
    loading: bool = False
    error: str = ""
    history_visible: bool = False
    theme: Theme = Theme.LIGHT
    now: datetime | None = None

    @property
    def has_weather(self) -> bool:
        return self.current_weather is not None
