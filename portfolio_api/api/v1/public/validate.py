# portfolio_api/api/v1/public/validate.py
from __future__ import annotations
import json
import logging

from fastapi import APIRouter, Depends, Request, Response

from portfolio_api.core.config import CodesConfig, get_codes_config
from portfolio_api.schemas.access_codes import ValidateCodeOut
from portfolio_api.services.authn.codes import ERR_NO_CODE, validate_access_code

logger = logging.getLogger(__name__)

ERR_GENERIC = "Something went wrong"

router = APIRouter(tags=["public:codes"])


@router.post(
    "/validate-code",
    response_model=ValidateCodeOut,
    response_model_exclude_none=True,
)
async def validate_code(
    request: Request,
    response: Response,
    cfg: CodesConfig = Depends(get_codes_config),
):
    # body is read by hand: a missing or non-string "code" is a normal
    # "no code" verdict, not a 422
    raw = await request.body()
    try:
        payload = json.loads(raw or b"{}")
    except ValueError as e:
        # answered here, inside the CORS layer, so the browser can read it
        logger.error("Unreadable validate-code body: %s", e)
        response.status_code = 500
        return ValidateCodeOut(valid=False, error=ERR_GENERIC)
    code = payload.get("code") if isinstance(payload, dict) else None

    verdict = validate_access_code(code, cfg.career_codes, cfg.career_salt)

    if verdict.config_error:
        response.status_code = 500
    elif verdict.error == ERR_NO_CODE:
        response.status_code = 400
    return ValidateCodeOut(**verdict.as_response())
