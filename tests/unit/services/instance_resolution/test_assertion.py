"""Tests for assert_single, predicates and the error hierarchy."""

from __future__ import annotations

import pytest

from src.services.instance_resolution.core.assertion import assert_single
from src.services.instance_resolution.core.predicates import (
    predicate_and,
    predicate_or,
    predicate_true,
)
from src.services.instance_resolution.errors import (
    ApiError,
    DeadlineExceededError,
    InstanceResolutionError,
    MultipleResultsError,
    NotFoundError,
    TransportError,
)


class TestAssertSingle:
    def test_empty_raises_not_found(self) -> None:
        request = {"DBInstanceIdentifier": "mydb"}

        with pytest.raises(NotFoundError) as exc_info:
            assert_single([], last_request=request)

        assert exc_info.value.last_request is request
        assert exc_info.value.last_error is None
        assert "empty result" in str(exc_info.value)

    def test_single_returns_element(self) -> None:
        record = {"DbiResourceId": "db-AAA"}
        assert assert_single([record]) is record

    def test_two_raises_multiple_results(self) -> None:
        records = [{"DbiResourceId": "db-AAA"}, {"DbiResourceId": "db-BBB"}]

        with pytest.raises(MultipleResultsError) as exc_info:
            assert_single(records, record_id=lambda r: r["DbiResourceId"])

        error = exc_info.value
        assert error.count == 2
        assert error.identifiers == ("db-AAA", "db-BBB")
        assert "got 2" in str(error)
        assert "db-AAA, db-BBB" in str(error)

    def test_multiple_without_record_id(self) -> None:
        with pytest.raises(MultipleResultsError) as exc_info:
            assert_single([object(), object(), object()])

        assert exc_info.value.count == 3
        assert exc_info.value.identifiers == ()

    def test_multiple_skips_unnamed_records(self) -> None:
        with pytest.raises(MultipleResultsError) as exc_info:
            assert_single([{"id": "a"}, {}], record_id=lambda r: r.get("id"))

        assert exc_info.value.identifiers == ("a",)


class TestPredicates:
    def test_predicate_true(self) -> None:
        assert predicate_true({"anything": 1})
        assert predicate_true(None)

    def test_predicate_and(self) -> None:
        is_available = lambda r: r["status"] == "available"  # noqa: E731
        is_postgres = lambda r: r["engine"] == "postgres"  # noqa: E731
        both = predicate_and(is_available, is_postgres)

        assert both({"status": "available", "engine": "postgres"})
        assert not both({"status": "stopped", "engine": "postgres"})
        assert predicate_and()({})

    def test_predicate_or(self) -> None:
        either = predicate_or(lambda r: r == 1, lambda r: r == 2)

        assert either(1)
        assert either(2)
        assert not either(3)
        assert not predicate_or()(1)


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(NotFoundError, InstanceResolutionError)
        assert issubclass(MultipleResultsError, InstanceResolutionError)
        assert issubclass(ApiError, TransportError)
        assert issubclass(DeadlineExceededError, TransportError)

    def test_api_error_fields(self) -> None:
        error = ApiError(
            code="DBInstanceNotFound",
            message="DBInstance mydb not found.",
            status_code=404,
            request_id="req-1",
        )

        assert str(error) == "[DBInstanceNotFound] DBInstance mydb not found."
        assert error.status_code == 404
        assert error.request_id == "req-1"

    def test_deadline_message(self) -> None:
        error = DeadlineExceededError(1.5)

        assert error.code == "DEADLINE_EXCEEDED"
        assert error.timeout == 1.5
        assert "1.50s" in str(error)
