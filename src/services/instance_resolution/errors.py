"""
Instance Resolution Errors

Exception hierarchy for DB instance lookups. Every error raised by the
resolution core or the bundled API clients inherits from
InstanceResolutionError so callers can catch them with one clause.

Usage:
    from src.services.instance_resolution.errors import NotFoundError

    try:
        instance = await resolver.resolve("db-BE6UI2KLPQP3OVDYD74ZEV6NUM")
    except NotFoundError:
        instance = None
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class InstanceResolutionError(Exception):
    """
    Base exception for instance resolution.

    Attributes:
        message: Human-readable error description
        code: Optional machine-readable error code
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class NotFoundError(InstanceResolutionError):
    """No DB instance matched in the namespace(s) that were queried."""

    def __init__(
        self,
        message: str = "couldn't find resource",
        last_request: Any = None,
        last_error: BaseException | None = None,
    ) -> None:
        """
        Initialize not-found error.

        Args:
            message: Error description
            last_request: The describe request that produced no match
            last_error: Underlying API fault, if the API reported one
        """
        super().__init__(message, code="NOT_FOUND")
        self.last_request = last_request
        self.last_error = last_error


class MultipleResultsError(InstanceResolutionError):
    """An identifier matched more than one DB instance."""

    def __init__(
        self,
        count: int,
        identifiers: Sequence[str] = (),
        last_request: Any = None,
    ) -> None:
        message = f"too many results: wanted 1, got {count}"
        if identifiers:
            message += f" ({', '.join(identifiers)})"
        super().__init__(message, code="TOO_MANY_RESULTS")
        self.count = count
        self.identifiers = tuple(identifiers)
        self.last_request = last_request


class TransportError(InstanceResolutionError):
    """The API client failed for a reason other than a missing instance."""

    def __init__(self, message: str, code: str | None = "TRANSPORT") -> None:
        super().__init__(message, code=code)


class ApiError(TransportError):
    """A fault reported by the management API."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        """
        Initialize API fault.

        Args:
            code: Fault code from the error body (e.g. "DBInstanceNotFound")
            message: Fault message from the error body
            status_code: HTTP status code of the response
            request_id: Value of the x-request-id response header
        """
        super().__init__(message, code=code)
        self.status_code = status_code
        self.request_id = request_id


class DeadlineExceededError(TransportError):
    """The caller's deadline expired before resolution finished."""

    def __init__(self, timeout: float) -> None:
        super().__init__(
            f"deadline of {timeout:.2f}s exceeded while describing DB instances",
            code="DEADLINE_EXCEEDED",
        )
        self.timeout = timeout
