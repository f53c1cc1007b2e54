"""File-backed storage for the tenant credentials."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from sophos_dashboard.core.exceptions import (
    CredentialsAbsentError,
    CredentialsMalformedError,
    StorageIOError,
)
from sophos_dashboard.core.paths import AppPaths
from sophos_dashboard.schemas import SophosCredentials
from sophos_dashboard.utils.files import read_text_if_exists, write_json_atomic

logger = logging.getLogger(__name__)


class CredentialStore:
    """Read and write the secrets file; every call goes back to disk."""

    def __init__(self, paths: AppPaths) -> None:
        self._paths = paths

    @property
    def path(self) -> Path:
        return self._paths.secrets_file

    def load(self) -> Optional[SophosCredentials]:
        """Return stored credentials, or ``None`` when no secrets file exists."""
        try:
            raw = read_text_if_exists(self.path)
        except OSError as exc:
            raise StorageIOError(f"Failed to read secrets file: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CredentialsMalformedError(f"Secrets file is not valid UTF-8: {exc}") from exc

        if raw is None:
            logger.info("No secrets file found at %s", self.path)
            return None

        try:
            credentials = SophosCredentials.model_validate_json(raw)
        except ValidationError as exc:
            raise CredentialsMalformedError(f"Failed to parse secrets file: {exc}") from exc

        logger.info("Loaded credentials for tenant %s", credentials.tenant_id)
        return credentials

    def require(self) -> SophosCredentials:
        """Like ``load`` but treat a missing file as an error."""
        credentials = self.load()
        if credentials is None:
            raise CredentialsAbsentError(
                "No Sophos credentials found. Please configure credentials first."
            )
        return credentials

    def save(self, credentials: SophosCredentials) -> Path:
        """Overwrite the secrets file and return its path."""
        try:
            self._paths.ensure_data_dir()
            write_json_atomic(self.path, credentials.model_dump())
        except OSError as exc:
            raise StorageIOError(str(exc)) from exc

        logger.info("Credentials saved to %s", self.path)
        return self.path


__all__ = ["CredentialStore"]
