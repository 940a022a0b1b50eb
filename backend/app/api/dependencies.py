"""Request Dependencies — auth gate and service wiring for route handlers.

Invariants:
    - get_current_identity is the only place the token cookie is read
    - Identity is derived per request from (cookie, secret) — no shared mutable state
    - Services get the request-scoped AsyncSession from get_db

Design Decisions:
    - FastAPI Depends over middleware: only identity-dependent routes pay for verification,
      public routes (/all-artifacts, /top-artifacts) stay unauthenticated
"""

import logging

from fastapi import Cookie, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.auth_token import authenticate
from app.core.domain_types import TOKEN_COOKIE_NAME, Identity
from app.core.errors import UnauthorizedError
from app.infrastructure.database import get_db
from app.services.artifact_catalog import ArtifactCatalog
from app.services.like_coordinator import LikeCoordinator

logger = logging.getLogger(__name__)


async def get_current_identity(
    token: str | None = Cookie(default=None, alias=TOKEN_COOKIE_NAME),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """Auth gate: verified identity or 401."""
    try:
        return authenticate(token, settings.access_token_secret)
    except UnauthorizedError as e:
        logger.warning(
            f"Unauthorized request ({e.reason})",
            extra={"error_code": e.code},
        )
        raise


async def get_catalog(db: AsyncSession = Depends(get_db)) -> ArtifactCatalog:
    return ArtifactCatalog(db)


async def get_like_coordinator(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> LikeCoordinator:
    return LikeCoordinator(db, transactional=settings.like_writes_transactional)
