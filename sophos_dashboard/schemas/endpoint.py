"""
Schemas for managed endpoint records and inventory pages.

Endpoint fields other than ``id`` are passed through untouched; nested blobs
such as ``os`` or ``health`` are kept as raw JSON values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class Endpoint(BaseModel):
    """A managed device as reported by the inventory API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    hostname: Optional[str] = None
    os: Optional[JsonValue] = None
    endpoint_type: Optional[str] = Field(None, alias="type")
    online: Optional[bool] = None
    health: Optional[JsonValue] = None
    group: Optional[JsonValue] = None
    ip_addresses: Optional[List[str]] = Field(None, alias="ipAddresses")
    ipv4_addresses: Optional[List[str]] = Field(None, alias="ipv4Addresses")
    ipv6_addresses: Optional[List[str]] = Field(None, alias="ipv6Addresses")
    last_seen: Optional[str] = Field(None, alias="lastSeen")

    def resolved_ip_addresses(self) -> List[str]:
        """Prefer ``ipAddresses``; otherwise combine the v4 and v6 lists."""
        if self.ip_addresses:
            return list(self.ip_addresses)
        return [*(self.ipv4_addresses or []), *(self.ipv6_addresses or [])]

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the vendor's camelCase keys, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class EndpointsPage(BaseModel):
    """One page of the inventory listing."""

    items: Optional[List[Endpoint]] = None
    pages: Optional[JsonValue] = None


__all__ = ["Endpoint", "EndpointsPage"]
