"""Like ORM — membership row asserting "liked_by likes artifact id".

Invariants:
    - Column `id` holds the artifact id (not the row key) — mirrors the client contract
    - No unique constraint on (id, liked_by): duplicates are possible and tolerated
    - Rows are created on increase and deleted (one at a time) on decrease

Design Decisions:
    - Surrogate key like_id so duplicate (id, liked_by) rows stay addressable for
      single-row deletes
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Like(Base):
    """Like entity — one (artifact, user) relation row."""
    __tablename__ = "likes"
    __table_args__ = (
        Index("ix_likes_artifact_liker", "id", "liked_by"),
    )

    like_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artifact_id: Mapped[uuid.UUID] = mapped_column(
        "id", UUID(as_uuid=True), nullable=False,
    )
    liked_by: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
