"""Service layer exports."""

from .cache_store import EndpointCacheStore
from .commands import CommandError, DashboardCommands
from .credential_store import CredentialStore
from .dashboard_data import DashboardDataService
from .endpoint_fetcher import EndpointFetcher
from .endpoint_summary import summarize_endpoints

__all__ = [
    "CommandError",
    "CredentialStore",
    "DashboardCommands",
    "DashboardDataService",
    "EndpointCacheStore",
    "EndpointFetcher",
    "summarize_endpoints",
]
