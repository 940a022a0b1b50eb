"""Auth Schemas — token issuance request."""

from pydantic import BaseModel, Field


class TokenRequest(BaseModel):
    """Identity payload signed into the cookie token."""
    email: str = Field(min_length=1)
