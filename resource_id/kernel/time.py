from __future__ import annotations

from datetime import datetime, timedelta, timezone

UTC = timezone.utc
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utc_now() -> datetime:
    """Return a tz-aware UTC timestamp."""
    return datetime.now(UTC)


def is_tz_aware(value: datetime) -> bool:
    """True if a datetime is timezone-aware (has a non-None UTC offset)."""
    return value.tzinfo is not None and value.utcoffset() is not None


def coerce_utc(value: datetime, *, assume_naive_is_utc: bool = True) -> datetime:
    """Coerce any datetime to tz-aware UTC.

    The ULID primitive may hand back naive or aware datetimes depending on its
    version; everything leaving the kernel goes through here.
    """
    if is_tz_aware(value):
        return value.astimezone(UTC)

    if not assume_naive_is_utc:
        raise ValueError("Naive datetime cannot be coerced without an explicit assumption")

    return value.replace(tzinfo=UTC)


def from_unix_millis(value: int) -> datetime:
    """Tz-aware UTC datetime for a millisecond Unix timestamp."""
    return _EPOCH + timedelta(milliseconds=value)


def isoformat_z(value: datetime) -> str:
    """RFC3339-ish UTC string with a `Z` suffix."""
    dt = coerce_utc(value)
    return dt.isoformat().replace("+00:00", "Z")
