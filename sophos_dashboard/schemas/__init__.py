"""Public schema exports."""

from .cache import CacheSnapshot
from .credentials import SophosCredentials
from .dashboard import AccessTokenPayload, DashboardStats, EndpointDataResult
from .endpoint import Endpoint, EndpointsPage
from .token import BearerToken

__all__ = [
    "AccessTokenPayload",
    "BearerToken",
    "CacheSnapshot",
    "DashboardStats",
    "Endpoint",
    "EndpointDataResult",
    "EndpointsPage",
    "SophosCredentials",
]
