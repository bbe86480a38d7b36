"""
Management API HTTP client base.

Both client generations speak the same JSON management API:

    POST {endpoint}/
    X-Api-Action: DescribeDBInstances
    {"DBInstanceIdentifier": "...", "Filters": [...], "Marker": "...", "MaxRecords": 100}

Faults come back as a non-2xx status with {"Error": {"Code": ..., "Message": ...}}.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import ApiError, TransportError
from ..resilience import CONNECTION_FAILED, RetryConfig, retry_with_backoff

logger = logging.getLogger(__name__)

DESCRIBE_DB_INSTANCES = "DescribeDBInstances"

# Fault code the API uses when a DB instance identifier doesn't exist
DB_INSTANCE_NOT_FOUND = "DBInstanceNotFound"


class ManagementApiClient:
    """
    Shared transport for the management API clients.

    Features:
    - Retry with backoff on connection failures and throttling faults
    - Per-request timeout
    - Connection pooling through one lazily created httpx.AsyncClient
    """

    # Fault code -> exception type; subclasses map codes to typed faults
    fault_types: dict[str, type[ApiError]] = {}

    def __init__(
        self,
        endpoint_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        retry_max_attempts: int = 3,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint_url: Base URL of the management API
            api_key: Optional bearer token
            timeout_seconds: Timeout for each HTTP request
            retry_max_attempts: Attempts for retryable failures
            http_client: Preconfigured httpx client (mainly for tests)
        """
        self._endpoint_url = endpoint_url.rstrip("/")
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._retry_config = RetryConfig(max_attempts=retry_max_attempts)
        self._client = http_client
        self._closed = False

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._closed:
            raise TransportError("client is closed", code="CLIENT_CLOSED")
        if self._client is None:
            headers = {}
            if self._api_key:
                headers["Authorization"] = f"Bearer {self._api_key}"

            self._client = httpx.AsyncClient(
                base_url=self._endpoint_url,
                headers=headers,
                timeout=httpx.Timeout(self._timeout_seconds),
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
        self._closed = True

    async def __aenter__(self) -> ManagementApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _call(self, action: str, body: dict[str, Any]) -> dict[str, Any] | None:
        """
        Invoke an API action.

        Returns:
            Decoded response body, or None if the API sent no body

        Raises:
            ApiError: If the API answered with a fault
            TransportError: If the request could not be completed
        """

        async def _make_request() -> dict[str, Any] | None:
            client = await self._get_client()
            try:
                response = await client.post("/", json=body, headers={"X-Api-Action": action})
            except httpx.TimeoutException as e:
                raise TransportError(f"{action} timed out: {e}", code="REQUEST_TIMEOUT") from e
            except httpx.NetworkError as e:
                raise TransportError(f"{action} failed: {e}", code=CONNECTION_FAILED) from e
            except httpx.HTTPError as e:
                raise TransportError(f"{action} failed: {e}") from e

            if response.is_error:
                raise self._parse_error(response)
            if not response.content:
                return None
            try:
                data = response.json()
            except ValueError as e:
                raise TransportError(f"{action} returned a malformed body: {e}") from e
            if not isinstance(data, dict):
                kind = type(data).__name__
                raise TransportError(f"{action} returned a malformed body: expected an object, got {kind}")
            return data

        return await retry_with_backoff(_make_request, config=self._retry_config)

    def _parse_error(self, response: httpx.Response) -> ApiError:
        """Build the ApiError for a fault response."""
        code = "InternalFailure" if response.status_code >= 500 else "UnknownError"
        message = response.reason_phrase or f"HTTP {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            data = None
        error = (data.get("Error") if isinstance(data, dict) else None) or {}
        code = error.get("Code") or code
        message = error.get("Message") or message

        fault_type = self.fault_types.get(code, ApiError)
        logger.debug(f"API fault {code} ({response.status_code}): {message}")
        return fault_type(
            code=code,
            message=message,
            status_code=response.status_code,
            request_id=response.headers.get("x-request-id"),
        )
