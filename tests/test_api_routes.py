try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from sophos_dashboard.core.exceptions import AuthError, FetchError, StorageIOError
from sophos_dashboard.main import app
from sophos_dashboard.schemas import Endpoint, SophosCredentials
from sophos_dashboard.services import CommandError, DashboardDataService


def _raise_from(cause: Exception, message: str) -> None:
    try:
        raise cause
    except Exception as exc:
        raise CommandError(message) from exc


class DummyCommands:
    def __init__(self) -> None:
        self.saved: list[SophosCredentials] = []
        self.tokens: list[str] = []
        self.fail_fetch = False
        self.fail_clear = False

    async def get_access_token(self) -> str:
        return "tok-abc"

    async def fetch_endpoints(self, access_token: str) -> list[Endpoint]:
        self.tokens.append(access_token)
        if self.fail_fetch:
            _raise_from(
                FetchError("API request failed on page 2 (401): expired", page=2, status_code=401),
                "API request failed on page 2 (401): expired",
            )
        return [
            Endpoint.model_validate(
                {"id": "e1", "type": "server", "online": True, "health": {"overall": "good"}}
            )
        ]

    def clear_cache(self) -> str:
        if self.fail_clear:
            _raise_from(StorageIOError("denied"), "Failed to clear cache: denied")
        return "No cache file to clear"

    def load_credentials(self) -> SophosCredentials:
        if not self.saved:
            raise CommandError("No Sophos credentials found. Please create a secrets file at: x")
        return self.saved[-1]

    def save_credentials(self, credentials: SophosCredentials) -> str:
        self.saved.append(credentials)
        return "Credentials saved successfully to: /tmp/sophos_secrets.json"

    def get_secrets_file_path(self) -> str:
        return "/tmp/sophos_secrets.json"


class FailingTokenCommands(DummyCommands):
    async def get_access_token(self) -> str:
        _raise_from(AuthError("Authentication failed: 401", status_code=401), "Authentication failed: 401")


@pytest.fixture()
def commands_override():
    from sophos_dashboard import dependencies

    dummy = DummyCommands()
    app.dependency_overrides[dependencies.get_dashboard_commands] = lambda: dummy
    app.dependency_overrides[dependencies.get_dashboard_data_service] = (
        lambda: DashboardDataService(dummy, use_mock_data=True)
    )

    yield dummy

    app.dependency_overrides.clear()


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    )


@pytest.mark.anyio
async def test_health() -> None:
    async with _client() as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test", "version": app.version}


@pytest.mark.anyio
async def test_token_then_endpoints(commands_override) -> None:
    async with _client() as client:
        token_resp = await client.post("/api/token")
        token = token_resp.json()["access_token"]
        endpoints_resp = await client.post("/api/endpoints", json={"access_token": token})

    assert token == "tok-abc"
    assert endpoints_resp.status_code == 200
    body = endpoints_resp.json()
    assert body["count"] == 1
    assert body["endpoints"][0] == {
        "id": "e1",
        "type": "server",
        "online": True,
        "health": {"overall": "good"},
    }
    assert commands_override.tokens == ["tok-abc"]


@pytest.mark.anyio
async def test_fetch_failure_maps_to_bad_gateway(commands_override) -> None:
    commands_override.fail_fetch = True

    async with _client() as client:
        response = await client.post("/api/endpoints", json={"access_token": "tok"})

    assert response.status_code == 502
    assert "page 2" in response.json()["detail"]


@pytest.mark.anyio
async def test_token_failure_maps_to_bad_gateway() -> None:
    from sophos_dashboard import dependencies

    app.dependency_overrides[dependencies.get_dashboard_commands] = FailingTokenCommands
    try:
        async with _client() as client:
            response = await client.post("/api/token")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 502
    assert response.json()["detail"] == "Authentication failed: 401"


@pytest.mark.anyio
async def test_summary(commands_override) -> None:
    async with _client() as client:
        response = await client.post("/api/endpoints/summary", json={"access_token": "tok"})

    stats = response.json()
    assert stats["total_endpoints"] == 1
    assert stats["healthy_endpoints"] == 1
    assert stats["type_counts"] == {"server": 1}


@pytest.mark.anyio
async def test_dashboard_serves_mock_data(commands_override) -> None:
    async with _client() as client:
        response = await client.get("/api/dashboard")

    body = response.json()
    assert body["source"] == "mock"
    assert body["success"] is True
    assert body["stats"]["total_endpoints"] == len(body["endpoints"]) == 10


@pytest.mark.anyio
async def test_cache_clear(commands_override) -> None:
    async with _client() as client:
        ok = await client.delete("/api/cache")
        commands_override.fail_clear = True
        failed = await client.delete("/api/cache")

    assert ok.json() == {"message": "No cache file to clear"}
    assert failed.status_code == 500
    assert failed.json()["detail"] == "Failed to clear cache: denied"


@pytest.mark.anyio
async def test_credentials_lifecycle(commands_override) -> None:
    payload = {
        "client_id": "client-1",
        "client_secret": "s3cret",
        "tenant_id": "tenant-a",
        "region": "eu02",
    }
    async with _client() as client:
        missing = await client.get("/api/credentials")
        saved = await client.put("/api/credentials", json=payload)
        loaded = await client.get("/api/credentials")
        path = await client.get("/api/credentials/path")

    assert missing.status_code == 404
    assert saved.json()["message"].startswith("Credentials saved successfully")
    assert loaded.json() == payload
    assert path.json() == {"path": "/tmp/sophos_secrets.json"}


@pytest.mark.anyio
async def test_save_credentials_validates_body(commands_override) -> None:
    async with _client() as client:
        response = await client.put("/api/credentials", json={"client_id": "only"})

    assert response.status_code == 422
    assert commands_override.saved == []


@pytest.mark.anyio
async def test_production_app_hides_interactive_docs(monkeypatch: pytest.MonkeyPatch) -> None:
    from sophos_dashboard.core.config import AppSettings
    from sophos_dashboard.main import create_app

    monkeypatch.setenv("APP_ENV", "production")
    production_app = create_app(AppSettings())

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=production_app), base_url="http://testserver"
    ) as client:
        docs = await client.get("/docs")
        health = await client.get("/api/health")

    assert docs.status_code == 404
    assert health.json()["environment"] == "production"


@pytest.mark.anyio
async def test_non_production_app_serves_docs() -> None:
    async with _client() as client:
        response = await client.get("/docs")

    assert response.status_code == 200
