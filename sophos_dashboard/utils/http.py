"""HTTP utilities shared by the Sophos API clients."""

from __future__ import annotations

from typing import Mapping

import httpx


def create_async_client(
    *,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    """Build an ``AsyncClient``; tests pass an ``httpx.MockTransport``."""
    return httpx.AsyncClient(timeout=timeout, transport=transport, headers=headers)


def response_snippet(response: httpx.Response, limit: int = 1000) -> str:
    """Return at most ``limit`` characters of the response body for logging."""
    text = response.text
    if len(text) > limit:
        return text[:limit]
    return text


__all__ = ["create_async_client", "response_snippet"]
