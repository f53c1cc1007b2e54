"""
Operations exposed to the dashboard UI.

Each command wraps one pipeline call and turns pipeline errors into
``CommandError`` carrying a message fit for display. The underlying exception is
kept as ``__cause__``.
"""

from __future__ import annotations

import json
import logging
from typing import List

from sophos_dashboard.clients.sophos_auth import SophosOAuthClient
from sophos_dashboard.core.exceptions import DashboardError, StorageIOError
from sophos_dashboard.schemas import Endpoint, SophosCredentials
from sophos_dashboard.services.cache_store import EndpointCacheStore
from sophos_dashboard.services.credential_store import CredentialStore
from sophos_dashboard.services.endpoint_fetcher import EndpointFetcher

logger = logging.getLogger(__name__)

EXAMPLE_SECRETS = {
    "client_id": "your-client-id",
    "client_secret": "your-client-secret",
    "tenant_id": "your-tenant-id",
    "region": "us01",
}


class CommandError(Exception):
    """User-facing failure of a dashboard command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DashboardCommands:
    """Glue between the UI and the credential, token and fetch pipeline."""

    def __init__(
        self,
        *,
        credential_store: CredentialStore,
        cache_store: EndpointCacheStore,
        oauth_client: SophosOAuthClient,
        fetcher: EndpointFetcher,
    ) -> None:
        self._credentials = credential_store
        self._cache = cache_store
        self._oauth = oauth_client
        self._fetcher = fetcher

    def _require_credentials(self) -> SophosCredentials:
        try:
            return self._credentials.require()
        except DashboardError as exc:
            raise CommandError(str(exc)) from exc

    async def get_access_token(self) -> str:
        credentials = self._require_credentials()
        try:
            token = await self._oauth.acquire_token(
                credentials.client_id, credentials.client_secret
            )
        except DashboardError as exc:
            logger.warning("Token acquisition failed: %s", exc)
            raise CommandError(str(exc)) from exc
        return token.access_token

    async def fetch_endpoints(self, access_token: str) -> List[Endpoint]:
        credentials = self._require_credentials()
        try:
            return await self._fetcher.fetch(
                access_token, credentials.tenant_id, credentials.region
            )
        except DashboardError as exc:
            logger.warning("Endpoint fetch failed: %s", exc)
            raise CommandError(str(exc)) from exc

    def clear_cache(self) -> str:
        try:
            removed = self._cache.clear()
        except StorageIOError as exc:
            raise CommandError(f"Failed to clear cache: {exc}") from exc
        if removed:
            return "Cache cleared successfully"
        return "No cache file to clear"

    def load_credentials(self) -> SophosCredentials:
        try:
            credentials = self._credentials.load()
        except DashboardError as exc:
            raise CommandError(str(exc)) from exc
        if credentials is None:
            example = json.dumps(EXAMPLE_SECRETS, indent=2)
            raise CommandError(
                "No Sophos credentials found. Please create a secrets file at: "
                f"{self._credentials.path}\n\nExample format:\n{example}"
            )
        return credentials

    def save_credentials(self, credentials: SophosCredentials) -> str:
        try:
            path = self._credentials.save(credentials)
        except StorageIOError as exc:
            raise CommandError(f"Failed to save credentials: {exc}") from exc
        return f"Credentials saved successfully to: {path}"

    def get_secrets_file_path(self) -> str:
        return str(self._credentials.path)


__all__ = ["CommandError", "DashboardCommands", "EXAMPLE_SECRETS"]
