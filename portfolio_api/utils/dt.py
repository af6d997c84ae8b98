# portfolio_api/utils/dt.py

from __future__ import annotations
from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware_utc(dt: datetime | None) -> datetime | None:
    if dt is None:
        return None
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def parse_timestamp(value) -> datetime | None:
    """
    ISO-8601 string -> aware UTC datetime, or None if it can't be parsed.
    Accepts a trailing ``Z``; naive values and bare dates are read as UTC.
    """
    if not isinstance(value, str):
        return None
    v = value.strip()
    if not v:
        return None
    if v[-1] in ("Z", "z"):
        v = v[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(v)
    except ValueError:
        return None
    return ensure_aware_utc(dt).astimezone(timezone.utc)


def to_iso_z(dt: datetime) -> str:
    # 2026-03-15T00:00:00.000Z
    dt = ensure_aware_utc(dt).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
