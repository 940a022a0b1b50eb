"""Like Schemas — like/unlike transition request and check-liked response."""

from uuid import UUID

from pydantic import BaseModel, Field

from app.core.domain_types import LikeDirection


class LikeTransitionRequest(BaseModel):
    """Body of POST /liked-artifact/{email}."""
    id: UUID
    liked_by: str = Field(min_length=1)
    likedStatus: LikeDirection


class CheckLikedResponse(BaseModel):
    likedStatus: bool
