"""Expose constructed client wrappers."""

from .endpoint_inventory import EndpointInventoryClient
from .sophos_auth import SophosOAuthClient

__all__ = [
    "EndpointInventoryClient",
    "SophosOAuthClient",
]
