"""
Instance Resolution - CLI Entry Point

Usage:
    python -m src.services.instance_resolution IDENTIFIER [options]

Examples:
    # Resolve a resource ID (falls back to a by-name lookup if needed)
    python -m src.services.instance_resolution db-BE6UI2KLPQP3OVDYD74ZEV6NUM

    # Resolve by name with the first-generation client, only if available
    python -m src.services.instance_resolution mydb-prod --client v1 --status available

Exit codes: 0 found, 1 not found, 2 ambiguous, 3 transport failure.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import BaseModel

from .config import InstanceServiceConfig
from .core.predicates import predicate_true
from .errors import MultipleResultsError, NotFoundError, TransportError
from .factory import create_instance_resolver

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_AMBIGUOUS = 2
EXIT_TRANSPORT = 3


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Resolve a DB instance by resource ID or identifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "identifier",
        help="DB instance resource ID (db-...) or DB instance identifier",
    )
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Management API endpoint (default: from config)",
    )
    parser.add_argument(
        "--client",
        choices=["v1", "v2"],
        default=None,
        help="API client generation (default: from config or v2)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Deadline in seconds for the whole resolution",
    )
    parser.add_argument(
        "--status",
        default=None,
        help="Only accept instances with this DBInstanceStatus",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (default: from config or info)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> InstanceServiceConfig:
    """Build configuration from args and environment."""
    overrides: dict[str, Any] = {}

    if args.endpoint:
        overrides["endpoint_url"] = args.endpoint
    if args.client:
        overrides["client_generation"] = args.client
    if args.timeout is not None:
        overrides["timeout_seconds"] = args.timeout
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()

    return InstanceServiceConfig(**overrides)


def status_predicate(status: str | None):
    """Build a predicate accepting records in the given DBInstanceStatus."""
    if not status:
        return predicate_true

    def _has_status(record: Any) -> bool:
        if isinstance(record, BaseModel):
            return record.db_instance_status == status
        return record.get("DBInstanceStatus") == status

    return _has_status


def to_json(record: Any) -> str:
    if isinstance(record, BaseModel):
        return record.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    return json.dumps(record, indent=2, default=str)


async def run(args: argparse.Namespace, config: InstanceServiceConfig) -> int:
    """Resolve args.identifier and print it; return the exit code."""
    logger = logging.getLogger(__name__)
    resolver = create_instance_resolver(config)

    try:
        record = await resolver.resolve(args.identifier, status_predicate(args.status))
    except NotFoundError as e:
        logger.debug(f"Not found: {e}")
        print(f"No DB instance found for {args.identifier!r}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except MultipleResultsError as e:
        print(f"Ambiguous identifier {args.identifier!r}: {e.message}", file=sys.stderr)
        return EXIT_AMBIGUOUS
    except TransportError as e:
        print(f"Describe failed: {e}", file=sys.stderr)
        return EXIT_TRANSPORT
    finally:
        await resolver.backend.close()

    print(to_json(record))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config.log_level)

    try:
        return asyncio.run(run(args, config))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
