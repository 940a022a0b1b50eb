"""Initial schema — artifacts and likes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

likes.id stores the artifact id. There is deliberately no foreign key and no
unique constraint on (id, liked_by).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "artifacts",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.Text, nullable=True),
        sa.Column("author_email", sa.Text, nullable=True),
        sa.Column("liked_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("details", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_artifacts_author_email", "artifacts", ["author_email"])
    op.create_index("ix_artifacts_liked_count", "artifacts", ["liked_count"])

    op.create_table(
        "likes",
        sa.Column("like_id", UUID(as_uuid=True), primary_key=True),
        sa.Column("id", UUID(as_uuid=True), nullable=False),
        sa.Column("liked_by", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_likes_artifact_liker", "likes", ["id", "liked_by"])


def downgrade() -> None:
    op.drop_index("ix_likes_artifact_liker", table_name="likes")
    op.drop_table("likes")
    op.drop_index("ix_artifacts_liked_count", table_name="artifacts")
    op.drop_index("ix_artifacts_author_email", table_name="artifacts")
    op.drop_table("artifacts")
