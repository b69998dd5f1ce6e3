"""Plain-text renderings of session data for the command line."""

import math
from collections.abc import Sequence
from datetime import datetime

from weatherapp.chart.projector import format_temperature
from weatherapp.models.chart import ChartLayout
from weatherapp.models.history import HistoryEntry
from weatherapp.models.weather import CurrentWeather, ForecastDay


def format_weather_text(w: CurrentWeather) -> str:
    lines = [
        f"=== {w.name} ===",
        f"{w.description} ({w.condition})",
        f"Temperature: {_round(w.temperature)}° | Feels like {_round(w.feels_like)}°",
        f"High {_round(w.temp_max)}° | Low {_round(w.temp_min)}°",
        f"Wind: {w.wind_speed} m/s | Humidity: {w.humidity}%",
        f"Pressure: {w.pressure} hPa | Visibility: {w.visibility_km:.1f} km",
    ]
    return "\n".join(lines)


def format_forecast_text(series: Sequence[ForecastDay]) -> str:
    if not series:
        return "No forecast available"
    lines = [f"{len(series)}-Day Forecast"]
    for day in series:
        lines.append(
            f"  {day.date}: {format_temperature(day.temperature)}° {day.description} "
            f"| {day.humidity}% | {day.wind_speed}m/s"
        )
    return "\n".join(lines)


def format_chart_text(layout: ChartLayout) -> str:
    """One line per projected point: date label, temperature label, coordinates."""
    if not layout.points:
        return "No chart data"
    lines = [f"Temperature Trend ({layout.width}x{layout.height})"]
    for p in layout.points:
        lines.append(
            f"  {p.date_label:>6} {p.temperature_label:>6} at ({p.x:.1f}, {p.y:.1f})"
        )
    return "\n".join(lines)


def format_history_text(entries: Sequence[HistoryEntry], locale: str = "en-IN") -> str:
    if not entries:
        return "No search history yet"
    lines = ["Recent Searches"]
    for e in entries:
        dt = e.searched_at_dt
        when = format_timestamp(dt, locale) if dt is not None else e.searched_at
        lines.append(f"  {e.city} ({when})")
    return "\n".join(lines)


def format_timestamp(dt: datetime, locale: str = "en-IN") -> str:
    """Locale-style date and time in the local timezone.

    en-IN: "17/10/2026, 3:04:05 pm"; en-US: "10/17/2026, 3:04:05 PM".
    Other locales fall back to ISO format.
    """
    local = dt.astimezone()
    hour = local.hour % 12 or 12
    clock = f"{hour}:{local.minute:02d}:{local.second:02d}"
    if locale == "en-IN":
        meridiem = "am" if local.hour < 12 else "pm"
        return f"{local.day}/{local.month}/{local.year}, {clock} {meridiem}"
    if locale == "en-US":
        meridiem = "AM" if local.hour < 12 else "PM"
        return f"{local.month}/{local.day}/{local.year}, {clock} {meridiem}"
    return local.isoformat(timespec="seconds")


def _round(value: float) -> int:
    """Round half up, so 28.5 shows as 29."""
    return math.floor(value + 0.5)
