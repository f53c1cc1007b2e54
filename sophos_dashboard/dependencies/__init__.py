"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_app_paths,
    get_cache_store,
    get_credential_store,
    get_dashboard_commands,
    get_dashboard_data_service,
    get_endpoint_fetcher,
    get_inventory_client,
    get_oauth_client,
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
