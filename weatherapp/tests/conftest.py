"""Shared test fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from weatherapp.api.client import WeatherApiClient
from weatherapp.config.schema import ApiConfig, AppConfig, SearchConfig
from weatherapp.models.history import parse_history
from weatherapp.models.weather import parse_current_weather, parse_forecast

TEST_BASE_URL = "https://test-api.example.com"


@pytest.fixture
def weather_payload() -> dict:
    """Current weather for Mumbai as the backend returns it."""
    return {
        "name": "Mumbai",
        "weather": [{"main": "Clouds", "description": "scattered clouds"}],
        "main": {
            "temp": 30.4,
            "feels_like": 35.2,
            "temp_min": 29.0,
            "temp_max": 31.5,
            "humidity": 74,
            "pressure": 1008,
        },
        "wind": {"speed": 4.6},
        "visibility": 6000,
    }


@pytest.fixture
def forecast_payload() -> list[dict]:
    return [
        {"date": "1/6/2024", "temperature": 30, "description": "light rain", "humidity": 80, "windSpeed": 5.1},
        {"date": "2/6/2024", "temperature": 34, "description": "clear sky", "humidity": 60, "windSpeed": 3.2},
        {"date": "3/6/2024", "temperature": 28, "description": "overcast clouds", "humidity": 85, "windSpeed": 6.0},
    ]


@pytest.fixture
def history_payload() -> list[dict]:
    return [
        {"city": "Mumbai", "searchedAt": "2024-06-03T09:15:00.000Z"},
        {"city": "Delhi", "searchedAt": "2024-06-02T18:40:00.000Z"},
    ]


@pytest.fixture
def weather(weather_payload):
    return parse_current_weather(weather_payload)


@pytest.fixture
def forecast(forecast_payload):
    return parse_forecast(forecast_payload)


@pytest.fixture
def history_entries(history_payload):
    return parse_history(history_payload)


@pytest.fixture
def mock_client(weather, forecast, history_entries) -> MagicMock:
    """WeatherApiClient mock whose async methods succeed by default."""
    client = MagicMock(spec=WeatherApiClient)
    client.search_cities.return_value = ["Mumbai"]
    client.get_current_weather.return_value = weather
    client.get_forecast.return_value = forecast
    client.get_history.return_value = history_entries
    client.clear_history.return_value = None
    return client


@pytest.fixture
def app_config() -> AppConfig:
    """Config pointing at the test backend with debounce disabled."""
    return AppConfig(
        api=ApiConfig(base_url=TEST_BASE_URL, timeout_seconds=1.0),
        search=SearchConfig(debounce_ms=0),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": TEST_BASE_URL, "timeout_seconds": 1.0},
        "search": {"debounce_ms": 0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
