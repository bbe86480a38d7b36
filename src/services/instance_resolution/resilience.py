"""
Retry Utilities

Exponential backoff for the bundled management API clients. Only the clients
retry; the resolution core treats every client failure as final.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from .errors import TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Codes set by the clients for connection failures, plus API throttling faults
CONNECTION_FAILED = "CONNECTION_FAILED"
DEFAULT_RETRYABLE_CODES = frozenset(
    {
        CONNECTION_FAILED,
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
    }
)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 3
    base_delay: float = 0.2
    max_delay: float = 5.0
    exponential_base: float = 2.0
    jitter: bool = True
    retryable_codes: frozenset[str] = field(default_factory=lambda: DEFAULT_RETRYABLE_CODES)

    def is_retryable(self, error: BaseException) -> bool:
        return isinstance(error, TransportError) and error.code in self.retryable_codes

    def delay_for(self, attempt: int) -> float:
        """Backoff before retrying after the given zero-based attempt."""
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        if self.jitter:
            delay = delay * (0.5 + random.random())
        return delay


async def retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
) -> T:
    """
    Call func until it succeeds or fails with a non-retryable error.

    Args:
        func: Zero-argument coroutine function
        config: Retry configuration

    Returns:
        Result of the first successful call

    Raises:
        The last error once attempts are exhausted, or the first
        non-retryable error
    """
    cfg = config or RetryConfig()

    for attempt in range(cfg.max_attempts):
        try:
            return await func()
        except TransportError as e:
            if not cfg.is_retryable(e) or attempt == cfg.max_attempts - 1:
                raise

            delay = cfg.delay_for(attempt)
            logger.debug(f"Retry {attempt + 1}/{cfg.max_attempts} after {delay:.2f}s: {e}")
            await asyncio.sleep(delay)

    raise RuntimeError("retry_with_backoff called with max_attempts < 1")
