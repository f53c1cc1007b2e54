"""Schema for the bearer token returned by the OAuth2 token endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BearerToken(BaseModel):
    """Short-lived token authorizing inventory requests. Never persisted."""

    access_token: str = Field(..., repr=False)
    token_type: str
    expires_in: int


__all__ = ["BearerToken"]
