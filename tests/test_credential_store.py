from __future__ import annotations

import json

import pytest

from sophos_dashboard.core.exceptions import (
    CredentialsAbsentError,
    CredentialsMalformedError,
    StorageIOError,
)
from sophos_dashboard.schemas import SophosCredentials
from sophos_dashboard.services import CredentialStore


def _credentials() -> SophosCredentials:
    return SophosCredentials(
        client_id="client-1",
        client_secret="s3cret",
        tenant_id="tenant-a",
        region="eu02",
    )


def test_load_returns_none_when_file_absent(app_paths) -> None:
    store = CredentialStore(app_paths)

    assert store.load() is None


def test_save_then_load_round_trips(app_paths) -> None:
    store = CredentialStore(app_paths)
    credentials = _credentials()

    path = store.save(credentials)

    assert path == app_paths.secrets_file
    assert store.load() == credentials
    assert json.loads(path.read_text(encoding="utf-8")) == credentials.model_dump()


def test_load_rereads_disk_on_every_call(app_paths) -> None:
    store = CredentialStore(app_paths)
    store.save(_credentials())

    app_paths.secrets_file.write_text(
        json.dumps(
            {
                "client_id": "edited",
                "client_secret": "edited-secret",
                "tenant_id": "tenant-b",
                "region": "us01",
            }
        ),
        encoding="utf-8",
    )

    loaded = store.load()
    assert loaded is not None
    assert loaded.tenant_id == "tenant-b"


def test_malformed_file_is_distinct_from_absence(app_paths) -> None:
    app_paths.ensure_data_dir()
    app_paths.secrets_file.write_text('{"client_id": "only"}', encoding="utf-8")
    store = CredentialStore(app_paths)

    with pytest.raises(CredentialsMalformedError):
        store.load()


def test_undecodable_bytes_are_malformed(app_paths) -> None:
    app_paths.ensure_data_dir()
    app_paths.secrets_file.write_bytes(b"\xff\xfe")
    store = CredentialStore(app_paths)

    with pytest.raises(CredentialsMalformedError):
        store.load()


def test_require_raises_when_absent(app_paths) -> None:
    store = CredentialStore(app_paths)

    with pytest.raises(CredentialsAbsentError):
        store.require()


def test_save_failure_raises_storage_error(tmp_path) -> None:
    from sophos_dashboard.core.paths import AppPaths

    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    store = CredentialStore(AppPaths(data_dir=blocker))

    with pytest.raises(StorageIOError):
        store.save(_credentials())


def test_secret_is_hidden_from_repr() -> None:
    assert "s3cret" not in repr(_credentials())
