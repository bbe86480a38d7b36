"""
Core instance resolution logic.

This module contains the resolution algorithm, independent of any API client
generation or transport.
"""

from .assertion import assert_single
from .classifier import RESOURCE_ID_PATTERN, classify, looks_like_resource_id
from .lister import list_instances
from .models import RESOURCE_ID_FILTER, Classification, Filter, InstanceQuery
from .predicates import predicate_and, predicate_or, predicate_true
from .protocols import DescribeBackend
from .query import build_query, by_name_query
from .resolver import InstanceResolver

__all__ = [
    "RESOURCE_ID_FILTER",
    "RESOURCE_ID_PATTERN",
    "Classification",
    "DescribeBackend",
    "Filter",
    "InstanceQuery",
    "InstanceResolver",
    "assert_single",
    "build_query",
    "by_name_query",
    "classify",
    "list_instances",
    "looks_like_resource_id",
    "predicate_and",
    "predicate_or",
    "predicate_true",
]
