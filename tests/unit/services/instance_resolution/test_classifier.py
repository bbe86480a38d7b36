"""Tests for identifier classification and query construction."""

from __future__ import annotations

import pytest

from src.services.instance_resolution.core.classifier import (
    RESOURCE_ID_PATTERN,
    classify,
    looks_like_resource_id,
)
from src.services.instance_resolution.core.models import (
    RESOURCE_ID_FILTER,
    Classification,
    Filter,
)
from src.services.instance_resolution.core.query import build_query, by_name_query


class TestClassify:
    """Test suite for classify()."""

    @pytest.mark.parametrize(
        "identifier",
        [
            "db-BE6UI2KLPQP3OVDYD74ZEV6NUM",
            "db-XYZ",
            "db-ab",
            "db-0123456789",
            "db-" + "A" * 255,
        ],
    )
    def test_resource_id_shapes(self, identifier: str) -> None:
        assert classify(identifier) is Classification.LOOKS_LIKE_RESOURCE_ID
        assert looks_like_resource_id(identifier)

    @pytest.mark.parametrize(
        "identifier",
        [
            "mydb-prod",
            "db-a",  # body too short
            "db-" + "A" * 256,  # body too long
            "db-has-dash",
            "db_underscore",
            "DB-UPPERPREFIX",
            " db-XYZ",
            "db-XYZ\n",
            "prefix-db-XYZ",
            "",
        ],
    )
    def test_name_shapes(self, identifier: str) -> None:
        assert classify(identifier) is Classification.LOOKS_LIKE_NAME
        assert not looks_like_resource_id(identifier)

    def test_pattern_is_compiled_once(self) -> None:
        """The module-level pattern is the one classify() uses."""
        assert RESOURCE_ID_PATTERN.pattern == r"db-[0-9A-Za-z]{2,255}"
        assert RESOURCE_ID_PATTERN.fullmatch("db-XYZ")


class TestBuildQuery:
    """Test suite for build_query()."""

    def test_resource_id_query_uses_filter_only(self) -> None:
        query = build_query("db-XYZ", Classification.LOOKS_LIKE_RESOURCE_ID)

        assert query.filters == (Filter(name=RESOURCE_ID_FILTER, values=("db-XYZ",)),)
        assert query.db_instance_identifier is None
        assert not query.is_by_name

    def test_name_query_uses_identifier_only(self) -> None:
        query = build_query("mydb-prod", Classification.LOOKS_LIKE_NAME)

        assert query.filters == ()
        assert query.db_instance_identifier == "mydb-prod"
        assert query.is_by_name

    @pytest.mark.parametrize("identifier", ["db-XYZ", "mydb-prod", "db-a", ""])
    def test_exactly_one_field_populated(self, identifier: str) -> None:
        query = build_query(identifier, classify(identifier))

        assert bool(query.filters) != (query.db_instance_identifier is not None)

    def test_by_name_query_ignores_shape(self) -> None:
        query = by_name_query("db-BE6UI2KLPQP3OVDYD74ZEV6NUM")

        assert query.db_instance_identifier == "db-BE6UI2KLPQP3OVDYD74ZEV6NUM"
        assert query.filters == ()

    def test_filter_wire_shape(self) -> None:
        assert Filter(name=RESOURCE_ID_FILTER, values=("db-XYZ",)).to_dict() == {
            "Name": "dbi-resource-id",
            "Values": ["db-XYZ"],
        }
