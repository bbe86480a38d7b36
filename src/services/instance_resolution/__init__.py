"""
DB Instance Resolution Service

Resolves an identifier that may be either a DB instance resource ID
("db-BE6UI2KLPQP3OVDYD74ZEV6NUM") or a user-chosen DB instance identifier to
exactly one DB instance, against either management API client generation.

Usage:
    # From the command line
    python -m src.services.instance_resolution db-BE6UI2KLPQP3OVDYD74ZEV6NUM

    # Programmatic
    from src.services.instance_resolution import create_instance_resolver, load_config

    resolver = create_instance_resolver(load_config())
    instance = await resolver.resolve("mydb-prod")
"""

__version__ = "0.1.0"

from .config import InstanceServiceConfig, load_config
from .core import Classification, InstanceQuery, InstanceResolver, classify
from .errors import (
    ApiError,
    DeadlineExceededError,
    InstanceResolutionError,
    MultipleResultsError,
    NotFoundError,
    TransportError,
)
from .factory import create_instance_resolver

__all__ = [
    "ApiError",
    "Classification",
    "DeadlineExceededError",
    "InstanceQuery",
    "InstanceResolutionError",
    "InstanceResolver",
    "InstanceServiceConfig",
    "MultipleResultsError",
    "NotFoundError",
    "TransportError",
    "classify",
    "create_instance_resolver",
    "load_config",
]
