"""
Instance Resolution Models

Generation-neutral value types shared by the classifier, query builder and
resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RESOURCE_ID_FILTER = "dbi-resource-id"


class Classification(str, Enum):
    """Which identifier namespace a string appears to belong to."""

    LOOKS_LIKE_RESOURCE_ID = "resource_id"
    LOOKS_LIKE_NAME = "name"


@dataclass(frozen=True)
class Filter:
    """A single describe filter (e.g. dbi-resource-id = [db-ABC])."""

    name: str
    values: tuple[str, ...]

    def to_dict(self) -> dict:
        """Convert to the wire shape used by describe requests."""
        return {"Name": self.name, "Values": list(self.values)}


@dataclass(frozen=True)
class InstanceQuery:
    """
    A describe query before it is shaped for a specific client generation.

    Exactly one of ``filters`` or ``db_instance_identifier`` is set when the
    query comes from build_query().
    """

    filters: tuple[Filter, ...] = ()
    db_instance_identifier: str | None = None

    @property
    def is_by_name(self) -> bool:
        return self.db_instance_identifier is not None
