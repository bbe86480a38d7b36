"""
Collapsing a result set to a single record.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from ..errors import MultipleResultsError, NotFoundError

T = TypeVar("T")


def assert_single(
    results: Sequence[T],
    last_request: Any = None,
    record_id: Callable[[T], str | None] | None = None,
) -> T:
    """
    Return the only element of results.

    Args:
        results: Records accumulated by one describe pass
        last_request: Request that produced the results, kept for diagnostics
        record_id: Optional function naming a record, used to list duplicates

    Returns:
        The single record

    Raises:
        NotFoundError: If results is empty
        MultipleResultsError: If results holds more than one record
    """
    if not results:
        raise NotFoundError("empty result", last_request=last_request)

    if len(results) > 1:
        identifiers: list[str] = []
        if record_id is not None:
            identifiers = [rid for rid in (record_id(r) for r in results) if rid]
        raise MultipleResultsError(
            count=len(results),
            identifiers=identifiers,
            last_request=last_request,
        )

    return results[0]
