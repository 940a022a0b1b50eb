"""Artifact Documents — pure mapping between free-form payloads and stored columns.

Invariants:
    - name, author_email, liked_count are first-class columns; everything else lives in details
    - Store-assigned keys (_id) in a payload are never written by clients
    - Documents flatten details back to the top level; column values win on key collisions

Design Decisions:
    - Hybrid column + JSON layout: queries (search, owner, ranking) hit real columns,
      descriptive fields stay verbatim without a schema migration per field
"""

from typing import Any

COLUMN_FIELDS = ("name", "author_email", "liked_count")
RESERVED_FIELDS = ("_id",)


def split_artifact_fields(payload: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a client payload into (column values, free-form details)."""
    columns: dict[str, Any] = {}
    details: dict[str, Any] = {}
    for key, value in payload.items():
        if key in RESERVED_FIELDS:
            continue
        if key in COLUMN_FIELDS:
            columns[key] = value
        else:
            details[key] = value
    return columns, details


def build_document(
    artifact_id: str, columns: dict[str, Any], details: dict[str, Any] | None,
) -> dict[str, Any]:
    """Assemble the client-facing artifact document."""
    return {**(details or {}), **columns, "_id": artifact_id}


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so a search term matches literally (escape char: backslash)."""
    return (
        term.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


# ─── Write acknowledgments ───────────────────────────────────────

def insert_ack(inserted_id: str) -> dict:
    return {"acknowledged": True, "insertedId": inserted_id}


def update_ack(
    matched: int, modified: int, upserted_id: str | None = None,
) -> dict:
    return {
        "acknowledged": True,
        "matchedCount": matched,
        "modifiedCount": modified,
        "upsertedId": upserted_id,
        "upsertedCount": 1 if upserted_id else 0,
    }


def delete_ack(deleted: int) -> dict:
    return {"acknowledged": True, "deletedCount": deleted}
