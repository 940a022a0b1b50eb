"""Artifact Routes — create, browse, rank, fetch, and update catalog artifacts.

Invariants:
    - /all-artifacts and /top-artifacts are public; every other route needs a verified identity
    - /my-artifacts/{email} is owner-only: identity email must equal the path email
    - PUT /single-artifact/{id} checks identity against the ?email= query value,
      NOT against the stored author_email, and upserts unknown ids
    - Missing artifacts come back as null with 200, never 404

Design Decisions:
    - Update ownership kept on the query email to stay wire-compatible with existing
      clients; the record's author_email is not consulted (see DESIGN.md)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_catalog, get_current_identity
from app.core.auth_token import require_owner
from app.core.domain_types import ArtifactId, Identity
from app.schemas.artifact import ArtifactPayload
from app.services.artifact_catalog import ArtifactCatalog

router = APIRouter(tags=["artifacts"])


@router.post("/create-artifact", status_code=status.HTTP_200_OK)
async def create_artifact(
    body: ArtifactPayload,
    identity: Identity = Depends(get_current_identity),
    catalog: ArtifactCatalog = Depends(get_catalog),
):
    return await catalog.create(body.to_fields())


@router.get("/all-artifacts")
async def all_artifacts(
    search: str = Query(""),
    catalog: ArtifactCatalog = Depends(get_catalog),
):
    return await catalog.search(search)


@router.get("/top-artifacts")
async def top_artifacts(catalog: ArtifactCatalog = Depends(get_catalog)):
    return await catalog.top()


@router.get("/single-artifact/{artifact_id}")
async def single_artifact(
    artifact_id: UUID,
    identity: Identity = Depends(get_current_identity),
    catalog: ArtifactCatalog = Depends(get_catalog),
):
    return await catalog.get(ArtifactId(artifact_id))


@router.get("/my-artifacts/{email}")
async def my_artifacts(
    email: str,
    identity: Identity = Depends(get_current_identity),
    catalog: ArtifactCatalog = Depends(get_catalog),
):
    require_owner(identity, email)
    return await catalog.list_by_owner(email)


@router.put("/single-artifact/{artifact_id}")
async def update_artifact(
    artifact_id: UUID,
    body: ArtifactPayload,
    email: str = Query(...),
    identity: Identity = Depends(get_current_identity),
    catalog: ArtifactCatalog = Depends(get_catalog),
):
    require_owner(identity, email)
    return await catalog.update(ArtifactId(artifact_id), body.to_fields())
