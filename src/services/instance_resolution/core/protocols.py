"""
Instance Resolution Protocols

Defines the capability interface each API client generation must provide so
that one resolution algorithm can run against all of them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from .models import InstanceQuery

RecordT = TypeVar("RecordT")


@runtime_checkable
class DescribeBackend(Protocol[RecordT]):
    """
    Protocol for a "describe DB instances" capability.

    Adapters wrap one client generation and translate between the
    generation-neutral InstanceQuery and that client's request and record
    shapes.
    """

    def build_request(self, query: InstanceQuery) -> Any:
        """
        Shape a query into this generation's describe request.

        Args:
            query: Generation-neutral query

        Returns:
            A request object the client accepts
        """
        ...

    async def drain_pages(
        self,
        request: Any,
        predicate: Callable[[RecordT], bool],
    ) -> list[RecordT]:
        """
        Fetch every page of a describe call, keeping records that pass predicate.

        Must not stop before the client signals the last page. Faults are
        raised exactly as the client raised them.

        Args:
            request: Request returned by build_request()
            predicate: Pure filter applied to each record

        Returns:
            Passing records in response order
        """
        ...

    def is_not_found_fault(self, error: BaseException) -> bool:
        """Return True if error is this generation's "DB instance not found" fault."""
        ...

    def record_id(self, record: RecordT) -> str | None:
        """Return a distinguishing identifier for record, if it has one."""
        ...

    async def close(self) -> None:
        """Release the underlying client."""
        ...
