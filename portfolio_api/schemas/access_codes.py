# portfolio_api/schemas/access_codes.py
from __future__ import annotations
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class AccessCodeEntry(BaseModel):
    """One entry of CAREER_CODES, as exported by manage-codes."""
    code: StrictStr
    name: Optional[StrictStr] = None
    # left unparsed; echoed back verbatim on success
    expires: Any = None
    model_config = ConfigDict(extra="ignore")


class StoredAccessCode(AccessCodeEntry):
    name: StrictStr
    expires: StrictStr
    created: Optional[StrictStr] = None

    def export(self) -> dict:
        return {"code": self.code, "name": self.name, "expires": self.expires}


class ValidateCodeOut(BaseModel):
    valid: bool
    name: Optional[str] = None
    expires: Optional[str] = None
    token: Optional[str] = None
    error: Optional[str] = Field(default=None)
