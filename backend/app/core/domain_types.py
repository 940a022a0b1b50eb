"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ArtifactId wraps UUIDs — the store assigns them, clients treat them as opaque
    - Email is compared by exact string equality (no normalization)
    - Like transitions are explicit: the caller picks the direction, the server never infers it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders and match the wire values directly
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ArtifactId = NewType("ArtifactId", UUID)
Email = NewType("Email", str)


@dataclass(frozen=True)
class Identity:
    """Verified caller identity decoded from a signed token."""
    email: Email


# ─── Enums ───────────────────────────────────────────────────────

class LikeDirection(str, Enum):
    """Requested like transition — wire value of `likedStatus`."""
    INCREASE = "increase"
    DECREASE = "decrease"


class LikeState(str, Enum):
    """Per (artifact, user) relation state."""
    NOT_LIKED = "not_liked"
    LIKED = "liked"


class Environment(str, Enum):
    """Deployment environment — drives cookie security attributes."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"


# ─── Constants ───────────────────────────────────────────────────

TOP_ARTIFACTS_LIMIT = 6
TOKEN_COOKIE_NAME = "token"
