"""Aggregate statistics over an endpoint list."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Optional

from sophos_dashboard.schemas import DashboardStats, Endpoint

UNKNOWN_OS = "Unknown OS"
DEFAULT_TYPE = "computer"
NO_GROUP = "No Group"


def _nested_str(value: Any, key: str) -> Optional[str]:
    if isinstance(value, dict):
        nested = value.get(key)
        if isinstance(nested, str) and nested:
            return nested
    return None


def summarize_endpoints(endpoints: Iterable[Endpoint]) -> DashboardStats:
    total = online = healthy = warning = critical = 0
    os_counts: Counter[str] = Counter()
    type_counts: Counter[str] = Counter()
    group_counts: Counter[str] = Counter()

    for endpoint in endpoints:
        total += 1
        if endpoint.online:
            online += 1

        health = _nested_str(endpoint.health, "overall")
        if health == "good":
            healthy += 1
        elif health == "warning":
            warning += 1
        elif health == "critical":
            critical += 1

        os_counts[_nested_str(endpoint.os, "name") or UNKNOWN_OS] += 1
        type_counts[endpoint.endpoint_type or DEFAULT_TYPE] += 1
        group_counts[_nested_str(endpoint.group, "name") or NO_GROUP] += 1

    return DashboardStats(
        total_endpoints=total,
        online_endpoints=online,
        offline_endpoints=total - online,
        healthy_endpoints=healthy,
        warning_endpoints=warning,
        critical_endpoints=critical,
        os_counts=dict(os_counts),
        type_counts=dict(type_counts),
        group_counts=dict(group_counts),
    )


__all__ = ["summarize_endpoints"]
