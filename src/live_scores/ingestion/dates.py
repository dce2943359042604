from __future__ import annotations

from datetime import UTC, datetime

from live_scores.ingestion.providers.base.errors import TimeParseError

# ESPN competition dates and tee times: minute precision, always UTC.
MINUTE_FORMAT = "%Y-%m-%dT%H:%MZ"


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


def parse_minute_time(value: str, *, field: str = "date") -> datetime:
    """Parse an ESPN style "2023-10-15T17:00Z" timestamp into a tz-aware UTC datetime."""

    try:
        return datetime.strptime(value, MINUTE_FORMAT).replace(tzinfo=UTC)
    except ValueError as e:
        raise TimeParseError(
            f"{field} is not in {MINUTE_FORMAT} format",
            context={"field": field, "value": value},
        ) from e


def parse_iso_z(value: str, *, field: str = "date") -> datetime:
    """Parse an ISO-8601 timestamp ("2023-01-10T00:00:00Z" / "+00:00") into UTC."""

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(v)
    except ValueError as e:
        raise TimeParseError(
            f"{field} is not an ISO-8601 timestamp",
            context={"field": field, "value": value},
        ) from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def whole_hours_between(a: datetime, b: datetime) -> int:
    """Absolute distance in whole hours, partial hours truncated."""

    return abs(int((a - b).total_seconds() / 3600))
