"""Identity and time primitives shared across the domain."""

from __future__ import annotations

from datetime import datetime, timezone

# Reserved actor id for signals whose target actor cannot be determined.
# Never a real profile id; consumers may test for it with is_unknown_actor().
UNKNOWN_ACTOR_ID = "unknown"

# Earliest instant; the transition boundary when a task never changed hands.
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_unknown_actor(actor_id: str | None) -> bool:
    return not actor_id or actor_id == UNKNOWN_ACTOR_ID


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so all comparisons are between aware values."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(raw, default: datetime | None = None) -> datetime | None:
    """Coerce a stored timestamp (datetime or ISO-8601 string) to aware UTC.

    Returns ``default`` when the value is missing or unparseable.
    """
    if isinstance(raw, datetime):
        return ensure_utc(raw)
    if isinstance(raw, str) and raw.strip():
        text = raw.strip()
        try:
            return ensure_utc(datetime.fromisoformat(text))
        except ValueError:
            return default
    return default
