"""Auth Gate — pure token issuance and verification.

Invariants:
    - authenticate() is a pure function of (token, secret): no IO, no shared state
    - Missing, tampered, expired, or email-less tokens all raise UnauthorizedError
    - Tokens always carry an `exp` claim; tokens without one are rejected

Design Decisions:
    - PyJWT with HS256: shared-secret signing, same shape as the client already expects
    - Cookie attributes derived from Environment here so routes stay thin
"""

from datetime import datetime, timedelta, timezone

import jwt

from app.core.domain_types import Email, Environment, Identity
from app.core.errors import ForbiddenError, UnauthorizedError

ALGORITHM = "HS256"


def issue_token(
    email: str, secret: str, expires_in_days: int = 365,
    now: datetime | None = None,
) -> str:
    """Sign an identity payload with a long expiry."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=expires_in_days),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def authenticate(token: str | None, secret: str) -> Identity:
    """Verify a credential and decode the identity it asserts."""
    if not token:
        raise UnauthorizedError("missing_token")
    try:
        payload = jwt.decode(
            token, secret, algorithms=[ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("expired_token")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("invalid_token")

    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise UnauthorizedError("missing_identity")
    return Identity(email=Email(email))


def require_owner(identity: Identity, email: str) -> None:
    """Raise ForbiddenError unless the verified identity is exactly `email`."""
    if identity.email != email:
        raise ForbiddenError()


def cookie_attributes(environment: Environment) -> dict:
    """Security attributes for the token cookie."""
    if environment == Environment.PRODUCTION:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "strict"}
