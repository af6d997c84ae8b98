#v1.0 - access codes from CAREER_CODES, no database
# portfolio_api/services/authn/codes.py
"""
Access-code validation for the Career Highlights page.

Codes come from the CAREER_CODES setting: a JSON array of
``{"code", "name", "expires"}`` objects produced by ``manage-codes export``.
The list is parsed on every call; nothing is cached.

The token returned on success is base64 of ``CODE:expires:salt``. It is a
reversible encoding, not a signature: it only stops someone from unlocking
the page by hand-writing localStorage. Clients must still compare the
returned ``expires`` against the clock on every visit.
"""
from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from portfolio_api.schemas.access_codes import AccessCodeEntry
from portfolio_api.utils.dt import now_utc, parse_timestamp

logger = logging.getLogger(__name__)

ERR_NO_CODE = "No code provided"
ERR_INVALID = "Invalid access code"
ERR_EXPIRED = "This code has expired"
ERR_CONFIG = "Server configuration error"

DEFAULT_NAME = "Guest"

_entries = TypeAdapter(List[AccessCodeEntry])


class CodesConfigError(ValueError):
    """CAREER_CODES is not a JSON list of code objects."""


@dataclass(frozen=True)
class CodeVerdict:
    valid: bool
    error: Optional[str] = None
    name: Optional[str] = None
    expires: Optional[str] = None
    token: Optional[str] = None
    config_error: bool = False

    def as_response(self) -> dict:
        if self.valid:
            return {"valid": True, "name": self.name, "expires": self.expires, "token": self.token}
        return {"valid": False, "error": self.error}


def normalize_code(code: str) -> str:
    return code.strip().upper()


def load_codes(raw: str | None) -> list[AccessCodeEntry]:
    try:
        data = json.loads(raw if raw is not None else "[]")
    except (TypeError, ValueError) as e:
        raise CodesConfigError(f"CAREER_CODES is not valid JSON: {e}") from e
    try:
        return _entries.validate_python(data)
    except ValidationError as e:
        raise CodesConfigError(f"CAREER_CODES has the wrong shape: {e.error_count()} error(s)") from e


def find_code(codes: list[AccessCodeEntry], code: str) -> AccessCodeEntry | None:
    """First entry whose code matches ``code`` (already normalized)."""
    for entry in codes:
        if entry.code.upper() == code:
            return entry
    return None


def is_expired(expires: Any, now: datetime | None = None) -> bool:
    # unparseable expiry counts as expired
    exp = parse_timestamp(expires)
    if exp is None:
        return True
    return exp <= (now or now_utc())


def issue_token(code: str, expires: str, secret: str) -> str:
    raw = f"{code}:{expires}:{secret}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def _mask(code: str) -> str:
    return code[:2] + "*" * max(len(code) - 2, 0)


def validate_access_code(
    submitted: Any,
    codes_raw: str | None,
    secret: str,
    now: datetime | None = None,
) -> CodeVerdict:
    if not isinstance(submitted, str) or not submitted.strip():
        return CodeVerdict(valid=False, error=ERR_NO_CODE)

    try:
        codes = load_codes(codes_raw)
    except CodesConfigError as e:
        logger.error("Failed to parse CAREER_CODES: %s", e)
        return CodeVerdict(valid=False, error=ERR_CONFIG, config_error=True)

    code = normalize_code(submitted)
    match = find_code(codes, code)
    if match is None:
        logger.info("Rejected unknown access code %s", _mask(code))
        return CodeVerdict(valid=False, error=ERR_INVALID)

    if is_expired(match.expires, now):
        logger.info("Rejected expired access code %s", _mask(code))
        return CodeVerdict(valid=False, error=ERR_EXPIRED)

    return CodeVerdict(
        valid=True,
        name=match.name or DEFAULT_NAME,
        expires=match.expires,
        token=issue_token(code, match.expires, secret),
    )
