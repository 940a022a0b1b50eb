"""Artifact Catalog — CRUD, search, ranking, and owner-scoped listing over artifacts.

Invariants:
    - create() stores the payload verbatim (columns + details) and returns an insert ack
    - get() returns None for unknown ids — absence is not an error
    - update() upserts: an unknown id creates a new artifact with that id
    - top() returns at most TOP_ARTIFACTS_LIMIT rows, liked_count descending, ties unordered

Design Decisions:
    - Ownership checks live in the API layer (they need the verified identity), not here
    - search() uses ILIKE with escaped wildcards: substring semantics without regex injection
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.artifact_document import (
    build_document, escape_like, insert_ack, split_artifact_fields, update_ack,
)
from app.core.domain_types import TOP_ARTIFACTS_LIMIT, ArtifactId
from app.models.artifact import Artifact

logger = logging.getLogger(__name__)


def serialize_artifact(artifact: Artifact) -> dict[str, Any]:
    """ORM row → client document."""
    return build_document(
        str(artifact.id),
        {
            "name": artifact.name,
            "author_email": artifact.author_email,
            "liked_count": artifact.liked_count,
        },
        artifact.details,
    )


class ArtifactCatalog:
    """Artifact CRUD handlers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: dict[str, Any]) -> dict:
        columns, details = split_artifact_fields(payload)
        if columns.get("liked_count") is None:
            columns["liked_count"] = 0
        artifact = Artifact(**columns, details=details)
        self.db.add(artifact)
        await self.db.commit()
        logger.info(
            f"Artifact created by {artifact.author_email}",
            extra={"artifact_id": str(artifact.id)},
        )
        return insert_ack(str(artifact.id))

    async def search(self, term: str | None = None) -> list[dict]:
        query = select(Artifact)
        if term:
            query = query.where(
                Artifact.name.ilike(f"%{escape_like(term)}%", escape="\\"),
            )
        result = await self.db.execute(query)
        return [serialize_artifact(a) for a in result.scalars().all()]

    async def top(self, limit: int = TOP_ARTIFACTS_LIMIT) -> list[dict]:
        result = await self.db.execute(
            select(Artifact).order_by(Artifact.liked_count.desc()).limit(limit),
        )
        return [serialize_artifact(a) for a in result.scalars().all()]

    async def get(self, artifact_id: ArtifactId) -> dict | None:
        artifact = await self.db.get(Artifact, artifact_id)
        return serialize_artifact(artifact) if artifact else None

    async def list_by_owner(self, email: str) -> list[dict]:
        result = await self.db.execute(
            select(Artifact).where(Artifact.author_email == email),
        )
        return [serialize_artifact(a) for a in result.scalars().all()]

    async def update(self, artifact_id: ArtifactId, fields: dict[str, Any]) -> dict:
        """Set the given fields on an artifact, creating it when absent."""
        columns, details = split_artifact_fields(fields)
        if columns.get("liked_count") is None:
            columns.pop("liked_count", None)
        artifact = await self.db.get(Artifact, artifact_id)

        if artifact is None:
            artifact = Artifact(id=artifact_id, **columns, details=details)
            self.db.add(artifact)
            await self.db.commit()
            logger.warning(
                "Update upserted a new artifact",
                extra={"artifact_id": str(artifact_id)},
            )
            return update_ack(0, 0, upserted_id=str(artifact_id))

        modified = False
        for key, value in columns.items():
            if getattr(artifact, key) != value:
                setattr(artifact, key, value)
                modified = True
        merged = {**(artifact.details or {}), **details}
        if merged != artifact.details:
            artifact.details = merged
            modified = True
        await self.db.commit()
        return update_ack(1, 1 if modified else 0)
