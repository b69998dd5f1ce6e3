"""Search history models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from weatherapp.models.common import parse_timestamp


@dataclass(frozen=True)
class HistoryEntry:
    city: str
    searched_at: str  # ISO timestamp as recorded by the backend

    @property
    def searched_at_dt(self) -> datetime | None:
        return parse_timestamp(self.searched_at)


def parse_history(data: list[dict[str, Any]]) -> list[HistoryEntry]:
    """Parse backend history, keeping its most-recent-first order."""
    return [
        HistoryEntry(city=str(item["city"]), searched_at=str(item.get("searchedAt", "")))
        for item in data
    ]
