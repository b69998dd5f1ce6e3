"""Tests for weather, forecast and history payload parsing."""

from datetime import UTC, datetime

import pytest

from weatherapp.models.common import parse_timestamp
from weatherapp.models.history import HistoryEntry, parse_history
from weatherapp.models.session import SessionState
from weatherapp.models.weather import parse_current_weather, parse_forecast


class TestParseCurrentWeather:
    def test_full_payload(self, weather_payload: dict):
        w = parse_current_weather(weather_payload)
        assert w.name == "Mumbai"
        assert w.feels_like == 35.2
        assert (w.temp_min, w.temp_max) == (29.0, 31.5)
        assert w.wind_speed == 4.6
        assert w.pressure == 1008
        assert w.visibility == 6000

    def test_optional_fields_default(self):
        w = parse_current_weather({"name": "Leh", "main": {"temp": -3}})
        assert w.temperature == -3.0
        assert w.feels_like == -3.0
        assert w.condition == ""
        assert w.visibility == 0

    def test_missing_main_raises(self):
        with pytest.raises(KeyError):
            parse_current_weather({"name": "Leh"})


class TestParseForecast:
    def test_keeps_order(self, forecast_payload: list):
        series = parse_forecast(forecast_payload)
        assert isinstance(series, tuple)
        assert [d.date for d in series] == ["1/6/2024", "2/6/2024", "3/6/2024"]
        assert series[2].description == "overcast clouds"

    def test_empty(self):
        assert parse_forecast([]) == ()

    def test_missing_temperature_raises(self):
        with pytest.raises(KeyError):
            parse_forecast([{"date": "1/6/2024"}])


class TestHistory:
    def test_parse_keeps_backend_order(self, history_payload: list):
        entries = parse_history(history_payload)
        assert [e.city for e in entries] == ["Mumbai", "Delhi"]
        assert entries[0].searched_at_dt == datetime(2024, 6, 3, 9, 15, tzinfo=UTC)

    def test_bad_timestamp(self):
        assert HistoryEntry("Goa", "yesterday").searched_at_dt is None

    def test_naive_timestamp_is_utc(self):
        assert parse_timestamp("2024-06-03T09:15:00") == datetime(2024, 6, 3, 9, 15, tzinfo=UTC)


class TestSessionState:
    def test_initial_state_shows_no_weather(self):
        state = SessionState()
        assert state.has_weather is False
        assert state.forecast == ()
        assert state.loading is False
