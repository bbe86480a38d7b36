"""
Paginated listing with not-found translation.

The per-generation page drains live in the adapters; this module turns the
generation's "not found" fault into a NotFoundError that the resolver can act
on, and leaves every other error untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace

from ..errors import NotFoundError
from .protocols import DescribeBackend

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

RecordT = TypeVar("RecordT")


async def list_instances(
    backend: DescribeBackend[RecordT],
    request: Any,
    predicate: Callable[[RecordT], bool],
) -> list[RecordT]:
    """
    Drain a describe call through backend.

    Args:
        backend: Client generation adapter
        request: Request built by backend.build_request()
        predicate: Filter applied to each record

    Returns:
        All records that passed predicate, in response order

    Raises:
        NotFoundError: If the API reported the DB instance as not found
    """
    with tracer.start_as_current_span("instance.describe") as span:
        span.set_attribute("instance.backend", type(backend).__name__)
        try:
            results = await backend.drain_pages(request, predicate)
        except Exception as e:
            if backend.is_not_found_fault(e):
                logger.debug(f"Describe reported not found: {e}")
                span.set_attribute("instance.not_found", True)
                raise NotFoundError(str(e), last_request=request, last_error=e) from e
            raise

        span.set_attribute("instance.match_count", len(results))
        return results
