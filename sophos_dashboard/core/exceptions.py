"""Error taxonomy for the endpoint retrieval pipeline."""

from __future__ import annotations

from typing import Optional


class DashboardError(Exception):
    """Base class for errors raised by the retrieval pipeline."""


class CredentialsAbsentError(DashboardError):
    """Raised when an operation needs credentials and none are stored."""


class CredentialsMalformedError(DashboardError):
    """Raised when the secrets file exists but cannot be parsed."""


class StorageIOError(DashboardError):
    """Raised when reading or writing a local file fails."""


class AuthError(DashboardError):
    """Raised when the OAuth2 token exchange fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchError(DashboardError):
    """Raised when an inventory page request fails; carries the page number."""

    def __init__(
        self,
        message: str,
        *,
        page: int,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.page = page
        self.status_code = status_code
        self.body = body


__all__ = [
    "AuthError",
    "CredentialsAbsentError",
    "CredentialsMalformedError",
    "DashboardError",
    "FetchError",
    "StorageIOError",
]
