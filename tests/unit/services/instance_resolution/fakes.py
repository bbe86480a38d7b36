"""
Test doubles for instance resolution.

Provides a scripted DescribeBackend for core tests and an in-process fake of
the management API (served through httpx.MockTransport) for client and
adapter tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

from src.services.instance_resolution.core.models import InstanceQuery

BASE_URL = "http://management.test"


def make_instance(
    identifier: str,
    resource_id: str,
    status: str = "available",
    **extra: Any,
) -> dict[str, Any]:
    """Build a DB instance record in wire shape."""
    record = {
        "DBInstanceIdentifier": identifier,
        "DbiResourceId": resource_id,
        "DBInstanceArn": f"arn:aws:rds:us-east-1:123456789012:db:{identifier}",
        "DBInstanceClass": "db.t3.micro",
        "DBInstanceStatus": status,
        "Engine": "postgres",
        "EngineVersion": "16.3",
    }
    record.update(extra)
    return record


class FakeNotFoundFault(Exception):
    """Stands in for a client generation's not-found fault."""


class ScriptedBackend:
    """
    DescribeBackend whose answers are scripted per query.

    Requests are the InstanceQuery objects themselves. Unscripted by-name
    queries raise FakeNotFoundFault, unscripted filter queries return no
    records, mirroring how the management API behaves.
    """

    def __init__(self) -> None:
        self.by_resource_id: dict[str, Any] = {}
        self.by_name: dict[str, Any] = {}
        self.requests: list[InstanceQuery] = []
        self.closed = False

    def build_request(self, query: InstanceQuery) -> InstanceQuery:
        return query

    async def drain_pages(
        self,
        request: InstanceQuery,
        predicate: Callable[[dict[str, Any]], bool],
    ) -> list[dict[str, Any]]:
        self.requests.append(request)

        if request.is_by_name:
            outcome = self.by_name.get(
                request.db_instance_identifier,
                FakeNotFoundFault(f"DBInstance {request.db_instance_identifier} not found"),
            )
        else:
            outcome = self.by_resource_id.get(request.filters[0].values[0], [])

        if isinstance(outcome, BaseException):
            raise outcome
        return [r for r in outcome if predicate(r)]

    def is_not_found_fault(self, error: BaseException) -> bool:
        return isinstance(error, FakeNotFoundFault)

    def record_id(self, record: dict[str, Any]) -> str | None:
        return record.get("DbiResourceId")

    async def close(self) -> None:
        self.closed = True


class FakeManagementApi:
    """
    In-process management API speaking the DescribeDBInstances wire format.

    Attributes:
        instances: Records served by the API
        page_size: Records per page when the request sets no MaxRecords
        faults: Queue of (status, code) faults returned before normal handling
        requests: Decoded bodies of every request received
    """

    def __init__(self, instances: list[dict[str, Any]] | None = None, page_size: int = 2):
        self.instances = list(instances or [])
        self.page_size = page_size
        self.faults: list[tuple[int, str]] = []
        self.requests: list[dict[str, Any]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content or b"{}")
        self.requests.append(body)

        if self.faults:
            status, code = self.faults.pop(0)
            return self._fault(status, code, f"{code} injected")

        matches = self.instances
        identifier = body.get("DBInstanceIdentifier")
        if identifier is not None:
            matches = [i for i in matches if i["DBInstanceIdentifier"] == identifier]
            if not matches:
                return self._fault(404, "DBInstanceNotFound", f"DBInstance {identifier} not found.")

        for f in body.get("Filters") or []:
            if f["Name"] == "dbi-resource-id":
                matches = [i for i in matches if i["DbiResourceId"] in f["Values"]]

        size = body.get("MaxRecords") or self.page_size
        start = int(body.get("Marker") or 0)
        payload: dict[str, Any] = {"DBInstances": matches[start : start + size]}
        if start + size < len(matches):
            payload["Marker"] = str(start + size)
        return httpx.Response(200, json=payload)

    def _fault(self, status: int, code: str, message: str) -> httpx.Response:
        return httpx.Response(
            status,
            json={"Error": {"Code": code, "Message": message}},
            headers={"x-request-id": f"req-{len(self.requests)}"},
        )

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(self.handler))

