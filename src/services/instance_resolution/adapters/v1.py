"""
Describe backend for the first-generation client.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..clients.base import DB_INSTANCE_NOT_FOUND
from ..clients.v1 import RdsClientV1
from ..core.models import InstanceQuery
from ..errors import ApiError

Record = dict[str, Any]


class DescribeBackendV1:
    """DescribeBackend over RdsClientV1; records are wire dicts."""

    def __init__(self, client: RdsClientV1, page_size: int | None = None):
        """
        Args:
            client: First-generation client
            page_size: MaxRecords to request per page, or None for the API default
        """
        self._client = client
        self._page_size = page_size

    @property
    def client(self) -> RdsClientV1:
        return self._client

    def build_request(self, query: InstanceQuery) -> dict[str, Any]:
        request: dict[str, Any] = {}
        if query.db_instance_identifier is not None:
            request["DBInstanceIdentifier"] = query.db_instance_identifier
        if query.filters:
            request["Filters"] = [f.to_dict() for f in query.filters]
        if self._page_size:
            request["MaxRecords"] = self._page_size
        return request

    async def drain_pages(
        self,
        request: dict[str, Any],
        predicate: Callable[[Record], bool],
    ) -> list[Record]:
        output: list[Record] = []

        def _on_page(page: dict[str, Any] | None, last_page: bool) -> bool:
            if page is None:
                return not last_page

            for record in page.get("DBInstances") or []:
                if record is not None and predicate(record):
                    output.append(record)

            return not last_page

        await self._client.describe_db_instances_pages(request, _on_page)
        return output

    def is_not_found_fault(self, error: BaseException) -> bool:
        return isinstance(error, ApiError) and error.code == DB_INSTANCE_NOT_FOUND

    def record_id(self, record: Record) -> str | None:
        return record.get("DbiResourceId") or record.get("DBInstanceIdentifier")

    async def close(self) -> None:
        await self._client.close()
