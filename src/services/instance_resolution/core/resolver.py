"""
DB Instance Resolver

Resolves a caller-supplied identifier to exactly one DB instance, whether the
identifier is a resource ID ("db-BE6UI2KLPQP3OVDYD74ZEV6NUM") or the
user-chosen DB instance identifier.

Resolution order:
1. Classify the identifier by shape
2. Describe with the query for the guessed namespace
3. If a resource-ID-shaped identifier found nothing, describe once more by name

Name-shaped identifiers are never retried as resource IDs: resource IDs are
generated by the platform and not typed by users.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from opentelemetry import trace

from ..errors import DeadlineExceededError, NotFoundError
from .assertion import assert_single
from .classifier import classify
from .lister import list_instances
from .models import Classification, InstanceQuery
from .predicates import predicate_true
from .protocols import DescribeBackend
from .query import build_query, by_name_query

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

RecordT = TypeVar("RecordT")


class InstanceResolver(Generic[RecordT]):
    """
    Resolves identifiers against one describe backend.

    The resolver keeps no per-call state, so one instance can serve any
    number of concurrent resolutions.
    """

    def __init__(
        self,
        backend: DescribeBackend[RecordT],
        timeout_seconds: float | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            backend: Adapter for the API client generation in use
            timeout_seconds: Default deadline for a whole resolution, or None
        """
        self._backend = backend
        self._timeout_seconds = timeout_seconds

    @property
    def backend(self) -> DescribeBackend[RecordT]:
        return self._backend

    async def find_instances(
        self,
        query: InstanceQuery,
        predicate: Callable[[RecordT], bool] = predicate_true,
    ) -> list[RecordT]:
        """
        Describe every instance matching query and predicate.

        Raises:
            NotFoundError: If the API reported the instance as not found
        """
        request = self._backend.build_request(query)
        return await list_instances(self._backend, request, predicate)

    async def find_instance(
        self,
        query: InstanceQuery,
        predicate: Callable[[RecordT], bool] = predicate_true,
    ) -> RecordT:
        """
        Describe exactly one instance matching query and predicate.

        Raises:
            NotFoundError: If nothing matched
            MultipleResultsError: If more than one instance matched
        """
        request = self._backend.build_request(query)
        results = await list_instances(self._backend, request, predicate)
        return assert_single(results, last_request=request, record_id=self._backend.record_id)

    async def resolve(
        self,
        identifier: str,
        predicate: Callable[[RecordT], bool] = predicate_true,
        *,
        timeout: float | None = None,
    ) -> RecordT:
        """
        Resolve an identifier of either namespace to a single DB instance.

        Args:
            identifier: Resource ID or DB instance identifier
            predicate: Extra filter applied to every described record
            timeout: Deadline in seconds for the whole resolution; defaults to
                the resolver's timeout_seconds

        Returns:
            The matching record

        Raises:
            NotFoundError: If no instance matched in the namespace(s) tried
            MultipleResultsError: If the identifier matched several instances
            DeadlineExceededError: If the deadline expired mid-resolution
            TransportError: For any other client failure
        """
        deadline = timeout if timeout is not None else self._timeout_seconds
        if deadline is None:
            return await self._resolve(identifier, predicate)

        loop = asyncio.get_running_loop()
        started = loop.time()
        try:
            return await asyncio.wait_for(self._resolve(identifier, predicate), timeout=deadline)
        except asyncio.TimeoutError as e:
            # A TimeoutError raised by the backend itself is not ours to rename
            if loop.time() - started < deadline:
                raise
            logger.warning(f"Resolution of {identifier!r} exceeded {deadline:.2f}s deadline")
            raise DeadlineExceededError(deadline) from e

    async def _resolve(
        self,
        identifier: str,
        predicate: Callable[[RecordT], bool],
    ) -> RecordT:
        with tracer.start_as_current_span("instance.resolve") as span:
            classification = classify(identifier)
            span.set_attribute("instance.classification", classification.value)
            logger.debug(f"Classified {identifier!r} as {classification.value}")

            try:
                return await self.find_instance(build_query(identifier, classification), predicate)
            except NotFoundError:
                # Only a resource-ID guess can be wrong: names may start with "db-".
                if classification is not Classification.LOOKS_LIKE_RESOURCE_ID:
                    raise

            logger.info(f"No instance with resource ID {identifier!r}, retrying as identifier")
            span.set_attribute("instance.fallback", True)
            return await self.find_instance(by_name_query(identifier), predicate)
