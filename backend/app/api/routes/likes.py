"""Like Routes — like/unlike transitions, liked lists, and like checks.

Invariants:
    - Every route needs a verified identity
    - /liked-artifacts/{email} is owner-only
    - POST /liked-artifact/{email} returns the Like-row write ack only (never the counter result)
    - likedStatus must be "increase" or "decrease" (400 otherwise)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_identity, get_like_coordinator
from app.core.auth_token import require_owner
from app.core.domain_types import ArtifactId, Identity
from app.schemas.like import CheckLikedResponse, LikeTransitionRequest
from app.services.like_coordinator import LikeCoordinator

router = APIRouter(tags=["likes"])


@router.post("/liked-artifact/{email}")
async def toggle_like(
    email: str,
    body: LikeTransitionRequest,
    identity: Identity = Depends(get_current_identity),
    coordinator: LikeCoordinator = Depends(get_like_coordinator),
):
    return await coordinator.apply(ArtifactId(body.id), body.liked_by, body.likedStatus)


@router.get("/liked-artifacts/{email}")
async def liked_artifacts(
    email: str,
    identity: Identity = Depends(get_current_identity),
    coordinator: LikeCoordinator = Depends(get_like_coordinator),
):
    require_owner(identity, email)
    return await coordinator.liked_by_user(email)


@router.get("/check-liked", response_model=CheckLikedResponse)
async def check_liked(
    id: UUID = Query(...),
    email: str = Query(...),
    identity: Identity = Depends(get_current_identity),
    coordinator: LikeCoordinator = Depends(get_like_coordinator),
):
    liked = await coordinator.is_liked(ArtifactId(id), email)
    return CheckLikedResponse(likedStatus=liked)
