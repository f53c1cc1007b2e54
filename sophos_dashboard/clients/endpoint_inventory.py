"""Client for the Sophos Central endpoint inventory listing."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from sophos_dashboard.core.config import SophosSettings
from sophos_dashboard.core.exceptions import FetchError
from sophos_dashboard.schemas import EndpointsPage
from sophos_dashboard.utils.http import create_async_client, response_snippet

logger = logging.getLogger(__name__)


class EndpointInventoryClient:
    """Request single pages of ``/endpoint/v1/endpoints`` for a tenant."""

    ENDPOINTS_PATH = "/endpoint/v1/endpoints"
    PAGE_SIZE = 100
    TENANT_HEADER = "X-Tenant-ID"

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

    def endpoints_url(self, region: str) -> str:
        host = self._settings.api_host_template.format(region=region)
        return f"{host.rstrip('/')}{self.ENDPOINTS_PATH}"

    def open_session(self) -> httpx.AsyncClient:
        """Return a client to be reused for every page of one listing."""
        return create_async_client(
            timeout=self._timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def fetch_page(
        self,
        session: httpx.AsyncClient,
        *,
        access_token: str,
        tenant_id: str,
        region: str,
        page: int,
        page_from_key: Optional[str] = None,
    ) -> EndpointsPage:
        """Fetch one page; ``page`` is the 1-based number used in errors."""
        params: dict[str, str | int] = {"pageSize": self.PAGE_SIZE}
        if page_from_key is not None:
            params["pageFromKey"] = page_from_key
        headers = {
            "Authorization": f"Bearer {access_token}",
            self.TENANT_HEADER: tenant_id,
        }

        try:
            response = await session.get(
                self.endpoints_url(region), params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            raise FetchError(f"Request failed on page {page}: {exc}", page=page) from exc

        if not response.is_success:
            raise FetchError(
                f"API request failed on page {page} ({response.status_code}): {response.text}",
                page=page,
                status_code=response.status_code,
                body=response.text,
            )

        if page == 1:
            logger.debug("Sample inventory response (page 1): %s", response_snippet(response))

        try:
            return EndpointsPage.model_validate_json(response.content)
        except ValidationError as exc:
            raise FetchError(
                f"Failed to parse response on page {page}: {exc}",
                page=page,
                status_code=response.status_code,
                body=response.text,
            ) from exc


__all__ = ["EndpointInventoryClient"]
