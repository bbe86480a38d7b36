"""
Instance Resolver Factory

Builds a resolver wired to the client generation named in configuration.
"""

from __future__ import annotations

import logging
from typing import Any

from .adapters import DescribeBackendV1, DescribeBackendV2
from .clients import RdsClientV1, RdsClientV2
from .config import InstanceServiceConfig
from .core.resolver import InstanceResolver

logger = logging.getLogger(__name__)


def create_instance_resolver(config: InstanceServiceConfig) -> InstanceResolver[Any]:
    """
    Create an InstanceResolver for the configured client generation.

    The caller owns the result; close it with ``await resolver.backend.close()``.

    Args:
        config: Service configuration

    Returns:
        Resolver backed by RdsClientV1 or RdsClientV2
    """
    client_kwargs = {
        "endpoint_url": config.endpoint_url,
        "api_key": config.api_key,
        "timeout_seconds": config.request_timeout_seconds,
        "retry_max_attempts": config.retry_max_attempts,
    }

    backend: DescribeBackendV1 | DescribeBackendV2
    if config.client_generation == "v1":
        backend = DescribeBackendV1(RdsClientV1(**client_kwargs), page_size=config.page_size)
    else:
        backend = DescribeBackendV2(RdsClientV2(**client_kwargs), page_size=config.page_size)

    logger.info(
        f"Created instance resolver ({config.client_generation} client, "
        f"endpoint={config.endpoint_url})"
    )
    return InstanceResolver(backend, timeout_seconds=config.timeout_seconds)
