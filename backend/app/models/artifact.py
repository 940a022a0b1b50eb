"""Artifact ORM — catalog record with an owner and a denormalized like counter.

Invariants:
    - id is UUID primary key (store-assigned unless an upsert supplies it)
    - liked_count mirrors count(likes where likes.id == artifacts.id) by convention only
    - details holds every client field that is not a column, verbatim

Design Decisions:
    - name/author_email nullable: counter upserts may create a bare row with only liked_count
    - Indexes on author_email and liked_count: owner listing and top-N ranking
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Artifact(Base):
    """Artifact entity — one catalog item."""
    __tablename__ = "artifacts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_email: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    liked_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True,
    )
    details: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
