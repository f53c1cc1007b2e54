"""Pytest configuration shared across the suite."""

from __future__ import annotations

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from pathlib import Path

import pytest

from sophos_dashboard.core.paths import AppPaths


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def app_paths(tmp_path: Path) -> AppPaths:
    """Point both stores at a throwaway data directory."""
    return AppPaths(data_dir=tmp_path / "sophos-dashboard")


class FakeClock:
    """Settable stand-in for ``time.time``."""

    def __init__(self, now: float = 1_700_000_000) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
