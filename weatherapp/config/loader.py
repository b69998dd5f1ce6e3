"""YAML config loader with environment override for the API base URL."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.schema import AppConfig

logger = logging.getLogger(__name__)

API_BASE_ENV = "WEATHERAPP_API_BASE"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields defaults. When WEATHERAPP_API_BASE is
    set it overrides api.base_url. The result is frozen for the session.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)

    env_base = os.environ.get(API_BASE_ENV, "").strip()
    if env_base:
        raw["api"] = {**(raw.get("api") or {}), "base_url": env_base}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.base_url'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
