"""Timestamp helpers shared across models."""

from datetime import UTC, datetime


def parse_timestamp(iso_str: str) -> datetime | None:
    """Parse an ISO timestamp, handling a trailing 'Z' and naive values."""
    try:
        dt = datetime.fromisoformat(iso_str.replace("Z", "+00:00"))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt
    except (ValueError, TypeError, AttributeError):
        return None
