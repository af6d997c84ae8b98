# portfolio_api/schemas/__init__.py
from portfolio_api.schemas.access_codes import (
    AccessCodeEntry,
    StoredAccessCode,
    ValidateCodeOut,
)

__all__ = ["AccessCodeEntry", "StoredAccessCode", "ValidateCodeOut"]
