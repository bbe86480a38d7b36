"""
Management API client, first generation.

Requests and records are plain dicts keyed by wire field names. Pagination is
push-based: describe_db_instances_pages() calls back once per page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .base import DESCRIBE_DB_INSTANCES, ManagementApiClient

logger = logging.getLogger(__name__)

PageCallback = Callable[[dict[str, Any] | None, bool], bool]


class RdsClientV1(ManagementApiClient):
    """First-generation client. Faults are raised as ApiError with a code."""

    async def describe_db_instances(self, **params: Any) -> dict[str, Any] | None:
        """Fetch one page of DB instances."""
        return await self._call(DESCRIBE_DB_INSTANCES, params)

    async def describe_db_instances_pages(
        self,
        params: dict[str, Any],
        fn: PageCallback,
    ) -> None:
        """
        Iterate over every page of a describe call.

        Args:
            params: Describe parameters; "Marker" is managed here
            fn: Called with (page, last_page); return False to stop early
        """
        request = dict(params)
        pages = 0
        while True:
            page = await self.describe_db_instances(**request)
            pages += 1
            marker = page.get("Marker") if page else None
            last_page = not marker

            if not fn(page, last_page) or last_page:
                logger.debug(f"DescribeDBInstances finished after {pages} page(s)")
                return
            request["Marker"] = marker
