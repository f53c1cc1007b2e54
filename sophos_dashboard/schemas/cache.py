"""Schema of the on-disk endpoint snapshot."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .endpoint import Endpoint


class CacheSnapshot(BaseModel):
    """Endpoints captured for a tenant at ``timestamp`` (unix seconds)."""

    endpoints: List[Endpoint]
    timestamp: int = Field(..., ge=0)
    tenant_id: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            "endpoints": [endpoint.to_wire() for endpoint in self.endpoints],
            "timestamp": self.timestamp,
            "tenant_id": self.tenant_id,
        }


__all__ = ["CacheSnapshot"]
