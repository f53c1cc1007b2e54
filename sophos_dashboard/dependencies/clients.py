"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from sophos_dashboard.clients import EndpointInventoryClient, SophosOAuthClient
from sophos_dashboard.core.config import get_settings
from sophos_dashboard.core.paths import AppPaths
from sophos_dashboard.services import (
    CredentialStore,
    DashboardCommands,
    DashboardDataService,
    EndpointCacheStore,
    EndpointFetcher,
)


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_app_paths() -> AppPaths:
    """Resolve the data directory holding the secrets and cache files."""
    return AppPaths.from_settings(_settings())


@lru_cache()
def get_credential_store() -> CredentialStore:
    """Provide the secrets file store."""
    return CredentialStore(get_app_paths())


@lru_cache()
def get_cache_store() -> EndpointCacheStore:
    """Provide the endpoint snapshot store."""
    return EndpointCacheStore(get_app_paths())


@lru_cache()
def get_oauth_client() -> SophosOAuthClient:
    """Create a singleton Sophos OAuth client."""
    settings = _settings()
    return SophosOAuthClient(settings.sophos, timeout=settings.http_timeout_seconds)


@lru_cache()
def get_inventory_client() -> EndpointInventoryClient:
    """Provide the endpoint inventory client."""
    settings = _settings()
    return EndpointInventoryClient(settings.sophos, timeout=settings.http_timeout_seconds)


def get_endpoint_fetcher() -> EndpointFetcher:
    """Build a fetcher over the shared inventory client and cache store."""
    return EndpointFetcher(get_inventory_client(), get_cache_store())


def get_dashboard_commands() -> DashboardCommands:
    """Build the command surface used by routes and the CLI."""
    return DashboardCommands(
        credential_store=get_credential_store(),
        cache_store=get_cache_store(),
        oauth_client=get_oauth_client(),
        fetcher=get_endpoint_fetcher(),
    )


def get_dashboard_data_service() -> DashboardDataService:
    """Build the dashboard data source with mock fallback."""
    return DashboardDataService(
        get_dashboard_commands(), use_mock_data=_settings().use_mock_data
    )


__all__ = [
    "get_app_paths",
    "get_cache_store",
    "get_credential_store",
    "get_dashboard_commands",
    "get_dashboard_data_service",
    "get_endpoint_fetcher",
    "get_inventory_client",
    "get_oauth_client",
]
