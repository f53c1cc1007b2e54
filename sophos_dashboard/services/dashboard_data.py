"""
Top-level data source for the dashboard view.

Falls back to a fixed set of demo endpoints when mock mode is switched on, when
no credentials are configured, or when the live path fails.
"""

from __future__ import annotations

import logging
from typing import List

from sophos_dashboard.schemas import Endpoint, EndpointDataResult
from sophos_dashboard.services.commands import CommandError, DashboardCommands

logger = logging.getLogger(__name__)


def _demo(
    id_: str,
    hostname: str,
    os_name: str,
    os_version: str | None,
    type_: str,
    online: bool,
    health: str,
    group: str,
    ip: str,
    last_seen: str,
) -> Endpoint:
    os_info: dict = {"name": os_name}
    if os_version:
        os_info["version"] = os_version
    return Endpoint.model_validate(
        {
            "id": id_,
            "hostname": hostname,
            "os": os_info,
            "type": type_,
            "online": online,
            "health": {"overall": health},
            "group": {"name": group},
            "ipAddresses": [ip],
            "lastSeen": last_seen,
        }
    )


MOCK_ENDPOINTS: List[Endpoint] = [
    _demo("1", "DESKTOP-ABC123", "Windows 11", "22H2", "computer", True, "good",
          "IT Department", "192.168.1.100", "2024-01-15T10:30:00Z"),
    _demo("2", "LAPTOP-XYZ789", "Windows 10", "21H2", "computer", False, "warning",
          "Sales Team", "192.168.1.101", "2024-01-14T16:45:00Z"),
    _demo("3", "MACBOOK-PRO-001", "macOS", "14.2", "computer", True, "good",
          "Design Team", "192.168.1.102", "2024-01-15T11:00:00Z"),
    _demo("4", "SERVER-PROD-01", "Windows Server 2022", None, "server", True, "critical",
          "Production Servers", "192.168.1.50", "2024-01-15T11:15:00Z"),
    _demo("5", "UBUNTU-DEV-01", "Ubuntu", "22.04", "server", True, "good",
          "Development", "192.168.1.51", "2024-01-15T11:20:00Z"),
    _demo("6", "WORKSTATION-DESIGN", "Windows 11", "23H2", "computer", True, "good",
          "Design Team", "192.168.1.103", "2024-01-15T11:25:00Z"),
    _demo("7", "LAPTOP-SALES-01", "Windows 10", "22H2", "computer", False, "warning",
          "Sales Team", "192.168.1.104", "2024-01-13T14:20:00Z"),
    _demo("8", "SERVER-DB-01", "Windows Server 2019", None, "server", True, "good",
          "Production Servers", "192.168.1.52", "2024-01-15T11:30:00Z"),
    _demo("9", "LAPTOP-HR-01", "Windows 11", "23H2", "computer", True, "good",
          "HR Department", "192.168.1.105", "2024-01-15T11:35:00Z"),
    _demo("10", "IPHONE-SALES-02", "iOS", "17.2", "mobile", True, "good",
          "Sales Team", "192.168.1.106", "2024-01-15T11:40:00Z"),
]


class DashboardDataService:
    """Resolve the endpoint list shown on the dashboard."""

    def __init__(self, commands: DashboardCommands, *, use_mock_data: bool = False) -> None:
        self._commands = commands
        self._use_mock_data = use_mock_data

    @staticmethod
    def _mock(*, success: bool = True, error: str | None = None) -> EndpointDataResult:
        return EndpointDataResult(
            success=success,
            data=list(MOCK_ENDPOINTS),
            source="mock",
            error=error,
        )

    async def get_endpoint_data(self) -> EndpointDataResult:
        if self._use_mock_data:
            logger.info("Using mock data (forced by configuration)")
            return self._mock()

        try:
            self._commands.load_credentials()
        except CommandError:
            logger.info("No usable Sophos credentials, using mock data")
            return self._mock()

        try:
            access_token = await self._commands.get_access_token()
            endpoints = await self._commands.fetch_endpoints(access_token)
        except CommandError as exc:
            logger.error("Live fetch failed, falling back to mock data: %s", exc)
            return self._mock(success=False, error=exc.message)

        logger.info("Fetched %d endpoints from Sophos Central", len(endpoints))
        return EndpointDataResult(success=True, data=endpoints, source="api")


__all__ = ["DashboardDataService", "MOCK_ENDPOINTS"]
