"""
Sophos Central OAuth2 utilities.

Exchanges API client credentials for a short-lived bearer token.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from sophos_dashboard.core.config import SophosSettings
from sophos_dashboard.core.exceptions import AuthError
from sophos_dashboard.schemas import BearerToken
from sophos_dashboard.utils.http import create_async_client

logger = logging.getLogger(__name__)


class SophosOAuthClient:
    """Perform the client-credentials grant against the Sophos identity service."""

    GRANT_TYPE = "client_credentials"

    def __init__(
        self,
        sophos_settings: SophosSettings,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = sophos_settings
        self._timeout = timeout
        self._transport = transport

    @property
    def token_url(self) -> str:
        return self._settings.token_url

    async def acquire_token(self, client_id: str, client_secret: str) -> BearerToken:
        """
        Exchange the client id and secret for a bearer token.

        A single attempt is made; any failure raises ``AuthError``.
        """
        payload = {
            "grant_type": self.GRANT_TYPE,
            "client_id": client_id,
            "client_secret": client_secret,
            "scope": self._settings.token_scope,
        }

        try:
            async with create_async_client(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self.token_url, data=payload)
        except httpx.HTTPError as exc:
            raise AuthError(f"Request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Token request rejected with status %s", response.status_code)
            raise AuthError(
                f"Authentication failed: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        try:
            token = BearerToken.model_validate_json(response.content)
        except ValidationError as exc:
            raise AuthError(f"Failed to parse response: {exc}") from exc

        logger.info("Obtained %s token valid for %ss", token.token_type, token.expires_in)
        return token


__all__ = ["SophosOAuthClient"]
