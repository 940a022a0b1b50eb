"""Like Coordinator — toggles (artifact, user) like rows and keeps liked_count in sync.

Invariants:
    - Every transition is two writes: (1) insert/delete one Like row, (2) blind +1/-1 on liked_count
    - The returned ack describes write (1) only; the counter outcome is not reported
    - increase never checks for an existing row: repeated calls create duplicate rows
    - decrease deletes at most one matching row, even when duplicates exist
    - The counter update is a single atomic UPDATE; a missing artifact is upserted with the delta
    - two_write mode (default) commits each write separately: a failure between them
      leaves liked_count != count(likes) until reconcile() runs
    - transactional mode commits both writes together or neither

Design Decisions:
    - Direction supplied by the caller, never inferred from current state (matches client contract)
    - Transactional mode is opt-in (settings.like_writes_transactional) so the default
      keeps two separately committed writes
    - reconcile() recomputes the counter from the rows: the repair path for drift
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.artifact_document import delete_ack, insert_ack
from app.core.domain_types import ArtifactId, LikeDirection, LikeState
from app.core.like_transition import (
    counter_delta, counter_drift, expected_liked_count, like_state, target_state,
)
from app.models.artifact import Artifact
from app.models.like import Like

logger = logging.getLogger(__name__)


def serialize_like(like: Like) -> dict:
    return {
        "_id": str(like.like_id),
        "id": str(like.artifact_id),
        "liked_by": like.liked_by,
    }


class LikeCoordinator:
    """Like/unlike transitions over the likes table and the artifact counter."""

    def __init__(self, db: AsyncSession, transactional: bool = False):
        self.db = db
        self.transactional = transactional

    @property
    def write_mode(self) -> str:
        return "transactional" if self.transactional else "two_write"

    async def apply(
        self, artifact_id: ArtifactId, liked_by: str, direction: LikeDirection,
    ) -> dict:
        """Run the transition the caller asked for."""
        direction = LikeDirection(direction)
        logger.info(
            f"Like transition → {target_state(direction).value}",
            extra={
                "artifact_id": str(artifact_id), "liked_by": liked_by,
                "direction": direction.value, "write_mode": self.write_mode,
            },
        )
        if direction == LikeDirection.INCREASE:
            return await self.like(artifact_id, liked_by)
        return await self.unlike(artifact_id, liked_by)

    async def like(self, artifact_id: ArtifactId, liked_by: str) -> dict:
        try:
            row = Like(artifact_id=artifact_id, liked_by=liked_by)
            self.db.add(row)
            await self._finish_first_write()
            await self._bump_counter(
                artifact_id, counter_delta(LikeDirection.INCREASE),
            )
            await self.db.commit()
        except Exception:
            await self._abort()
            raise
        return insert_ack(str(row.like_id))

    async def unlike(self, artifact_id: ArtifactId, liked_by: str) -> dict:
        try:
            result = await self.db.execute(
                select(Like.like_id)
                .where(Like.artifact_id == artifact_id)
                .where(Like.liked_by == liked_by)
                .limit(1)
            )
            like_id = result.scalar_one_or_none()
            deleted = 0
            if like_id is not None:
                removed = await self.db.execute(
                    delete(Like).where(Like.like_id == like_id),
                )
                deleted = removed.rowcount
            await self._finish_first_write()
            await self._bump_counter(
                artifact_id, counter_delta(LikeDirection.DECREASE),
            )
            await self.db.commit()
        except Exception:
            await self._abort()
            raise
        return delete_ack(deleted)

    async def is_liked(self, artifact_id: ArtifactId, email: str) -> bool:
        rows = await self._count_likes(artifact_id, email)
        return like_state(rows) == LikeState.LIKED

    async def liked_by_user(self, email: str) -> list[dict]:
        result = await self.db.execute(
            select(Like).where(Like.liked_by == email),
        )
        return [serialize_like(like) for like in result.scalars().all()]

    async def reconcile(self, artifact_id: ArtifactId) -> int:
        """Reset liked_count to the number of Like rows. Returns the corrected count."""
        rows = await self._count_likes(artifact_id)
        expected = expected_liked_count(rows)
        artifact = await self.db.get(
            Artifact, artifact_id, populate_existing=True,
        )
        if artifact is None:
            return expected

        drift = counter_drift(artifact.liked_count, rows)
        if drift:
            logger.warning(
                f"liked_count drift of {drift} corrected",
                extra={"artifact_id": str(artifact_id)},
            )
            artifact.liked_count = expected
            await self.db.commit()
        return expected

    # ─── internals ───────────────────────────────────────────────

    async def _finish_first_write(self) -> None:
        if self.transactional:
            await self.db.flush()
        else:
            await self.db.commit()

    async def _abort(self) -> None:
        if self.transactional:
            await self.db.rollback()

    async def _bump_counter(self, artifact_id: ArtifactId, delta: int) -> None:
        result = await self.db.execute(
            update(Artifact)
            .where(Artifact.id == artifact_id)
            .values(liked_count=Artifact.liked_count + delta)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            # upsert: counter starts from the delta itself
            self.db.add(Artifact(id=artifact_id, liked_count=delta, details={}))
            await self.db.flush()

    async def _count_likes(
        self, artifact_id: ArtifactId, email: str | None = None,
    ) -> int:
        query = (
            select(func.count())
            .select_from(Like)
            .where(Like.artifact_id == artifact_id)
        )
        if email is not None:
            query = query.where(Like.liked_by == email)
        result = await self.db.execute(query)
        return result.scalar_one()
