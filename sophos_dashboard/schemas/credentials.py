"""Schemas describing the tenant credentials kept in the secrets file."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SophosCredentials(BaseModel):
    """Client-credentials pair plus the tenant and region to query."""

    client_id: str = Field(..., description="OAuth2 client identifier.")
    client_secret: str = Field(..., repr=False, description="OAuth2 client secret.")
    tenant_id: str = Field(..., description="Tenant whose endpoints are listed.")
    region: str = Field(..., description="Regional API host suffix, e.g. 'us01'.")


__all__ = ["SophosCredentials"]
