#v1.0
# portfolio_api/services/repo/access_codes.py
"""
Local JSON store behind ``manage-codes``.

The file holds a list of StoredAccessCode objects. It never leaves the
operator's machine; ``export_codes`` produces the value to paste into the
CAREER_CODES setting of the deployed service.
"""
from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timedelta
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from portfolio_api.schemas.access_codes import StoredAccessCode
from portfolio_api.services.authn.codes import is_expired
from portfolio_api.services.codegen import generate_unique_code
from portfolio_api.utils.dt import now_utc, to_iso_z

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"^(\d+)(h|d)$", re.IGNORECASE)
_stored = TypeAdapter(List[StoredAccessCode])


class CodeStoreError(ValueError):
    pass


class DurationError(ValueError):
    pass


class CodeNotFound(LookupError):
    pass


def parse_duration(value: str) -> timedelta:
    """'7d' -> 7 days, '48h' -> 48 hours."""
    m = _DURATION_RE.match((value or "").strip())
    if not m:
        raise DurationError("Invalid duration format. Use e.g., 7d (days) or 48h (hours)")
    amount = int(m.group(1))
    if m.group(2).lower() == "h":
        return timedelta(hours=amount)
    return timedelta(days=amount)


def load_codes(path: Path) -> list[StoredAccessCode]:
    if not path.exists():
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8") or "[]")
        return _stored.validate_python(data)
    except (ValueError, ValidationError) as e:
        raise CodeStoreError(f"{path} is not a valid codes file: {e}") from e


def save_codes(path: Path, codes: list[StoredAccessCode]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [c.model_dump(exclude_none=True) for c in codes]
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


def add_code(path: Path, name: str, duration: str, now: datetime | None = None) -> StoredAccessCode:
    now = now or now_utc()
    expires = now + parse_duration(duration)
    codes = load_codes(path)
    entry = StoredAccessCode(
        code=generate_unique_code(c.code for c in codes),
        name=name,
        expires=to_iso_z(expires),
        created=to_iso_z(now),
    )
    codes.append(entry)
    save_codes(path, codes)
    logger.debug("added code %s for %r", entry.code, name)
    return entry


def revoke_code(path: Path, code: str) -> StoredAccessCode:
    target = code.strip().upper()
    codes = load_codes(path)
    kept = [c for c in codes if c.code.upper() != target]
    if len(kept) == len(codes):
        raise CodeNotFound(target)
    save_codes(path, kept)
    return next(c for c in codes if c.code.upper() == target)


def cleanup_expired(path: Path, now: datetime | None = None) -> tuple[int, int]:
    """Drop expired codes. Returns (removed, remaining)."""
    now = now or now_utc()
    codes = load_codes(path)
    kept = [c for c in codes if not is_expired(c.expires, now)]
    save_codes(path, kept)
    return len(codes) - len(kept), len(kept)


def export_codes(path: Path) -> list[dict]:
    return [c.export() for c in load_codes(path)]
