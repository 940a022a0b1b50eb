"""Auth Routes — token cookie issuance and logout.

Invariants:
    - POST /jwt signs {email} for token_expiry_days and sets it as an http-only cookie
    - POST /logout expires the cookie immediately (max-age 0) with the same attributes
    - Neither route requires an existing credential
"""

import logging

from fastapi import APIRouter, Depends, Response

from app.config import Settings, get_settings
from app.core.auth_token import cookie_attributes, issue_token
from app.core.domain_types import TOKEN_COOKIE_NAME
from app.schemas.auth import TokenRequest

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


@router.post("/jwt")
async def issue_cookie_token(
    body: TokenRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
):
    token = issue_token(
        body.email, settings.access_token_secret,
        expires_in_days=settings.token_expiry_days,
    )
    response.set_cookie(
        TOKEN_COOKIE_NAME, token, **cookie_attributes(settings.environment),
    )
    return {"success": True}


@router.post("/logout")
async def logout(
    response: Response, settings: Settings = Depends(get_settings),
):
    response.delete_cookie(
        TOKEN_COOKIE_NAME, **cookie_attributes(settings.environment),
    )
    return {"success": True}
