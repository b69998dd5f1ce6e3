"""Current weather and daily forecast models, parsed from backend payloads."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CurrentWeather:
    name: str
    description: str
    condition: str  # primary condition tag, e.g. "Clouds"
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    wind_speed: float
    humidity: int
    pressure: int
    visibility: int  # metres

    @property
    def visibility_km(self) -> float:
        return self.visibility / 1000


@dataclass(frozen=True)
class ForecastDay:
    date: str  # D/M/Y as formatted by the backend
    temperature: float
    description: str
    humidity: int
    wind_speed: float


ForecastSeries = tuple[ForecastDay, ...]


def parse_current_weather(data: dict[str, Any]) -> CurrentWeather:
    """Build a CurrentWeather from the backend's OpenWeather-shaped payload.

    Raises KeyError/TypeError/ValueError when required fields are missing.
    """
    conditions = data.get("weather") or [{}]
    main = data["main"]
    return CurrentWeather(
        name=data.get("name", ""),
        description=conditions[0].get("description", ""),
        condition=conditions[0].get("main", ""),
        temperature=float(main["temp"]),
        feels_like=float(main.get("feels_like", main["temp"])),
        temp_min=float(main.get("temp_min", main["temp"])),
        temp_max=float(main.get("temp_max", main["temp"])),
        wind_speed=float(data.get("wind", {}).get("speed", 0.0)),
        humidity=int(main.get("humidity", 0)),
        pressure=int(main.get("pressure", 0)),
        visibility=int(data.get("visibility", 0)),
    )


def parse_forecast(data: list[dict[str, Any]]) -> ForecastSeries:
    """Build a chronological ForecastSeries from the backend's daily entries."""
    return tuple(
        ForecastDay(
            date=str(d.get("date", "")),
            temperature=float(d["temperature"]),
            description=d.get("description", ""),
            humidity=int(d.get("humidity", 0)),
            wind_speed=float(d.get("windSpeed", 0.0)),
        )
        for d in data
    )
