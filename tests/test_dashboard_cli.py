"""Tests for the dashboard command-line tool."""

from __future__ import annotations

import json

import pytest

from scripts import dashboard_cli
from sophos_dashboard.schemas import Endpoint, SophosCredentials
from sophos_dashboard.services import CommandError


class StubCommands:
    def __init__(self) -> None:
        self.saved: list[SophosCredentials] = []

    async def get_access_token(self) -> str:
        return "tok"

    async def fetch_endpoints(self, access_token: str) -> list[Endpoint]:
        return [Endpoint.model_validate({"id": "e1", "lastSeen": "2024-01-15T10:30:00Z"})]

    def clear_cache(self) -> str:
        return "Cache cleared successfully"

    def load_credentials(self) -> SophosCredentials:
        if not self.saved:
            raise CommandError("No Sophos credentials found.")
        return self.saved[-1]

    def save_credentials(self, credentials: SophosCredentials) -> str:
        self.saved.append(credentials)
        return "Credentials saved successfully to: secrets.json"

    def get_secrets_file_path(self) -> str:
        return "secrets.json"


def test_fetch_prints_endpoints_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = dashboard_cli.main(["fetch"], commands=StubCommands())

    assert exit_code == dashboard_cli.EXIT_OK
    assert json.loads(capsys.readouterr().out) == [
        {"id": "e1", "lastSeen": "2024-01-15T10:30:00Z"}
    ]


def test_fetch_count_only(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = dashboard_cli.main(["fetch", "--count-only"], commands=StubCommands())

    assert exit_code == dashboard_cli.EXIT_OK
    assert capsys.readouterr().out.strip() == "1"


def test_credentials_save_then_show_masks_secret(capsys: pytest.CaptureFixture[str]) -> None:
    commands = StubCommands()

    save_code = dashboard_cli.main(
        [
            "credentials",
            "save",
            "--client-id",
            "client-1",
            "--client-secret",
            "s3cret",
            "--tenant-id",
            "tenant-a",
        ],
        commands=commands,
    )
    capsys.readouterr()
    show_code = dashboard_cli.main(["credentials", "show"], commands=commands)

    assert save_code == show_code == dashboard_cli.EXIT_OK
    assert commands.saved[0].region == "us01"
    shown = json.loads(capsys.readouterr().out)
    assert shown["client_secret"] == "********"
    assert shown["tenant_id"] == "tenant-a"


def test_command_error_sets_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = dashboard_cli.main(["credentials", "show"], commands=StubCommands())

    assert exit_code == dashboard_cli.EXIT_COMMAND_ERROR
    assert "No Sophos credentials found." in capsys.readouterr().err


def test_clear_cache_and_path(capsys: pytest.CaptureFixture[str]) -> None:
    commands = StubCommands()

    assert dashboard_cli.main(["clear-cache"], commands=commands) == dashboard_cli.EXIT_OK
    assert dashboard_cli.main(["credentials", "path"], commands=commands) == dashboard_cli.EXIT_OK
    assert capsys.readouterr().out.splitlines() == [
        "Cache cleared successfully",
        "secrets.json",
    ]
