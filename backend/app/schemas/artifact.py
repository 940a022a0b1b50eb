"""Artifact Schemas — free-form artifact payloads with a few typed fields.

Invariants:
    - Unknown fields are kept (extra="allow") and stored verbatim
    - author_email is trusted as sent; ownership is not derived from the token
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ArtifactPayload(BaseModel):
    """Artifact create/update body — typed known fields, everything else passed through."""
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    author_email: str | None = None
    liked_count: int | None = None

    def to_fields(self) -> dict[str, Any]:
        """Fields the client actually sent, including extras."""
        sent = self.model_fields_set | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump().items() if k in sent}
