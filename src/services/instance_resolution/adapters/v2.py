"""
Describe backend for the second-generation client.
"""

from __future__ import annotations

from collections.abc import Callable

from ..clients.v2 import (
    DBInstance,
    DBInstanceNotFoundFault,
    DescribeDBInstancesInput,
    DescribeDBInstancesPaginator,
    Filter,
    RdsClientV2,
)
from ..core.models import InstanceQuery


class DescribeBackendV2:
    """DescribeBackend over RdsClientV2; records are DBInstance models."""

    def __init__(self, client: RdsClientV2, page_size: int | None = None):
        self._client = client
        self._page_size = page_size

    @property
    def client(self) -> RdsClientV2:
        return self._client

    def build_request(self, query: InstanceQuery) -> DescribeDBInstancesInput:
        filters = None
        if query.filters:
            filters = [Filter(name=f.name, values=list(f.values)) for f in query.filters]
        return DescribeDBInstancesInput(
            db_instance_identifier=query.db_instance_identifier,
            filters=filters,
            max_records=self._page_size,
        )

    async def drain_pages(
        self,
        request: DescribeDBInstancesInput,
        predicate: Callable[[DBInstance], bool],
    ) -> list[DBInstance]:
        output: list[DBInstance] = []
        paginator = DescribeDBInstancesPaginator(self._client, request)

        while paginator.has_more_pages():
            page = await paginator.next_page()
            if page is None:
                continue
            output.extend(r for r in page.db_instances if predicate(r))

        return output

    def is_not_found_fault(self, error: BaseException) -> bool:
        return isinstance(error, DBInstanceNotFoundFault)

    def record_id(self, record: DBInstance) -> str | None:
        return record.dbi_resource_id or record.db_instance_identifier

    async def close(self) -> None:
        await self._client.close()
