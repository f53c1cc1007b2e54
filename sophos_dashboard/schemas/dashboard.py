"""Schemas served to the dashboard UI."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .endpoint import Endpoint


class AccessTokenPayload(BaseModel):
    """Request body carrying a bearer token obtained from ``/token``."""

    access_token: str = Field(..., repr=False)


class DashboardStats(BaseModel):
    """Aggregate counts rendered on the dashboard overview."""

    total_endpoints: int = 0
    online_endpoints: int = 0
    offline_endpoints: int = 0
    healthy_endpoints: int = 0
    warning_endpoints: int = 0
    critical_endpoints: int = 0
    os_counts: Dict[str, int] = Field(default_factory=dict)
    type_counts: Dict[str, int] = Field(default_factory=dict)
    group_counts: Dict[str, int] = Field(default_factory=dict)


class EndpointDataResult(BaseModel):
    """Endpoint list plus where it came from."""

    success: bool
    data: List[Endpoint] = Field(default_factory=list)
    source: Literal["api", "mock"]
    error: Optional[str] = None


__all__ = ["AccessTokenPayload", "DashboardStats", "EndpointDataResult"]
