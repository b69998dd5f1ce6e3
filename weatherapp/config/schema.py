"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = "http://localhost:5000/api"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    debounce_ms: int = Field(default=250, ge=0)


class ClockConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    tick_seconds: float = Field(default=1.0, gt=0.0)
    locale: str = "en-IN"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    clock: ClockConfig = ClockConfig()
