"""
Record predicates.

Predicates are applied to every record drained from the describe API; they
must be pure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


def predicate_true(record: Any) -> bool:
    """Accept every record."""
    return True


def predicate_and(*predicates: Predicate[T]) -> Predicate[T]:
    """Combine predicates; a record passes only if all of them accept it."""

    def _and(record: T) -> bool:
        return all(p(record) for p in predicates)

    return _and


def predicate_or(*predicates: Predicate[T]) -> Predicate[T]:
    """Combine predicates; a record passes if any of them accepts it."""

    def _or(record: T) -> bool:
        return any(p(record) for p in predicates)

    return _or
