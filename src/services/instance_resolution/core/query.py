"""
Describe query construction.
"""

from __future__ import annotations

from .models import RESOURCE_ID_FILTER, Classification, Filter, InstanceQuery


def build_query(identifier: str, classification: Classification) -> InstanceQuery:
    """
    Build the describe query for the namespace the identifier was classified in.

    Args:
        identifier: Caller-supplied identifier
        classification: Result of classify(identifier)

    Returns:
        A query filtering on dbi-resource-id, or one addressing the
        instance directly by its identifier
    """
    if classification is Classification.LOOKS_LIKE_RESOURCE_ID:
        return InstanceQuery(filters=(Filter(name=RESOURCE_ID_FILTER, values=(identifier,)),))
    return by_name_query(identifier)


def by_name_query(identifier: str) -> InstanceQuery:
    """Build a query that addresses the instance by its user-chosen identifier."""
    return InstanceQuery(db_instance_identifier=identifier)
