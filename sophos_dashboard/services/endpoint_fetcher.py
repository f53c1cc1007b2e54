"""
Paginated retrieval of a tenant's endpoints.

The listing is walked page by page following the ``pages.nextKey`` cursor,
records are deduplicated by ``id`` in order of first appearance, and the
complete result is written to the cache. A failure on any page discards the
pages gathered so far.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Iterable, List, Optional, Set

from sophos_dashboard.clients.endpoint_inventory import EndpointInventoryClient
from sophos_dashboard.schemas import Endpoint
from sophos_dashboard.services.cache_store import EndpointCacheStore

logger = logging.getLogger(__name__)


def merge_unique(
    accumulator: List[Endpoint], seen_ids: Set[str], items: Iterable[Endpoint]
) -> int:
    """Append items whose id is unseen; return how many were appended."""
    added = 0
    for item in items:
        if item.id in seen_ids:
            continue
        seen_ids.add(item.id)
        accumulator.append(item)
        added += 1
    return added


def next_page_key(pages: Any) -> Optional[str]:
    """Return the cursor for the following page, or ``None`` to stop."""
    if not isinstance(pages, dict) or "nextKey" not in pages:
        return None
    next_key = pages["nextKey"]
    if not isinstance(next_key, str):
        logger.warning("nextKey found but not a string, stopping pagination")
        return None
    return next_key


class EndpointFetcher:
    """Serve endpoints from cache or walk the inventory listing."""

    PAGE_DELAY_SECONDS = 0.1

    def __init__(
        self,
        inventory_client: EndpointInventoryClient,
        cache_store: EndpointCacheStore,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._inventory = inventory_client
        self._cache = cache_store
        self._sleep = sleep

    async def fetch(self, access_token: str, tenant_id: str, region: str) -> List[Endpoint]:
        """Return the tenant's endpoints, from cache when a fresh snapshot exists."""
        cached = self._cache.load(tenant_id)
        if cached is not None:
            return cached

        endpoints = await self._fetch_all_pages(access_token, tenant_id, region)
        self._cache.save(endpoints, tenant_id)
        return endpoints

    async def _fetch_all_pages(
        self, access_token: str, tenant_id: str, region: str
    ) -> List[Endpoint]:
        endpoints: List[Endpoint] = []
        seen_ids: Set[str] = set()
        page_from_key: Optional[str] = None
        page = 0

        logger.info(
            "Fetching endpoint inventory (page size %d)", self._inventory.PAGE_SIZE
        )
        async with self._inventory.open_session() as session:
            while True:
                page += 1
                result = await self._inventory.fetch_page(
                    session,
                    access_token=access_token,
                    tenant_id=tenant_id,
                    region=region,
                    page=page,
                    page_from_key=page_from_key,
                )

                items = result.items or []
                if not items:
                    logger.info("Page %d returned no endpoints, stopping pagination", page)
                    break

                added = merge_unique(endpoints, seen_ids, items)
                if added != len(items):
                    logger.warning(
                        "Found %d duplicate endpoints on page %d", len(items) - added, page
                    )
                logger.info(
                    "Page %d: %d unique of %d (running total %d)",
                    page,
                    added,
                    len(items),
                    len(endpoints),
                )

                page_from_key = next_page_key(result.pages)
                if page_from_key is None:
                    break

                await self._sleep(self.PAGE_DELAY_SECONDS)

        logger.info(
            "Pagination complete: %d endpoints across %d pages", len(endpoints), page
        )
        return endpoints


__all__ = ["EndpointFetcher", "merge_unique", "next_page_key"]
