"""
Management API client, second generation.

Requests and responses are typed pydantic models, faults are typed exceptions,
and pagination is pull-based through DescribeDBInstancesPaginator.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ApiError, TransportError
from .base import DB_INSTANCE_NOT_FOUND, DESCRIBE_DB_INSTANCES, ManagementApiClient

logger = logging.getLogger(__name__)


class DBInstanceNotFoundFault(ApiError):
    """The requested DB instance doesn't exist."""


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Filter(_WireModel):
    name: str = Field(..., alias="Name")
    values: list[str] = Field(default_factory=list, alias="Values")


class Endpoint(_WireModel):
    address: str | None = Field(None, alias="Address")
    port: int | None = Field(None, alias="Port")
    hosted_zone_id: str | None = Field(None, alias="HostedZoneId")


class DBInstance(_WireModel):
    """A described DB instance."""

    db_instance_identifier: str | None = Field(None, alias="DBInstanceIdentifier")
    dbi_resource_id: str | None = Field(None, alias="DbiResourceId")
    db_instance_arn: str | None = Field(None, alias="DBInstanceArn")
    db_instance_class: str | None = Field(None, alias="DBInstanceClass")
    db_instance_status: str | None = Field(None, alias="DBInstanceStatus")
    engine: str | None = Field(None, alias="Engine")
    engine_version: str | None = Field(None, alias="EngineVersion")
    allocated_storage: int | None = Field(None, alias="AllocatedStorage")
    availability_zone: str | None = Field(None, alias="AvailabilityZone")
    multi_az: bool | None = Field(None, alias="MultiAZ")
    endpoint: Endpoint | None = Field(None, alias="Endpoint")


class DescribeDBInstancesInput(_WireModel):
    db_instance_identifier: str | None = Field(None, alias="DBInstanceIdentifier")
    filters: list[Filter] | None = Field(None, alias="Filters")
    marker: str | None = Field(None, alias="Marker")
    max_records: int | None = Field(None, alias="MaxRecords", ge=20, le=100)


class DescribeDBInstancesOutput(_WireModel):
    db_instances: list[DBInstance] = Field(default_factory=list, alias="DBInstances")
    marker: str | None = Field(None, alias="Marker")

    @field_validator("db_instances", mode="before")
    @classmethod
    def drop_missing_instances(cls, value: Any) -> Any:
        """A null list or null entries mean no records."""
        if value is None:
            return []
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value


class RdsClientV2(ManagementApiClient):
    """Second-generation client."""

    fault_types = {DB_INSTANCE_NOT_FOUND: DBInstanceNotFoundFault}

    async def describe_db_instances(
        self,
        params: DescribeDBInstancesInput,
    ) -> DescribeDBInstancesOutput | None:
        """
        Fetch one page of DB instances.

        Returns:
            The page, or None if the API returned no body

        Raises:
            DBInstanceNotFoundFault: If DBInstanceIdentifier names no instance
            TransportError: If the body does not describe DB instances
        """
        data = await self._call(
            DESCRIBE_DB_INSTANCES,
            params.model_dump(by_alias=True, exclude_none=True),
        )
        if data is None:
            return None
        try:
            return DescribeDBInstancesOutput.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"{DESCRIBE_DB_INSTANCES} returned a malformed body: {e}") from e


class DescribeDBInstancesPaginator:
    """
    Pull-based pagination over DescribeDBInstances.

    Usage:
        paginator = DescribeDBInstancesPaginator(client, params)
        while paginator.has_more_pages():
            page = await paginator.next_page()
    """

    def __init__(self, client: RdsClientV2, params: DescribeDBInstancesInput):
        self._client = client
        self._params = params
        self._next_marker: str | None = params.marker
        self._first_page = True

    def has_more_pages(self) -> bool:
        return self._first_page or bool(self._next_marker)

    async def next_page(self) -> DescribeDBInstancesOutput | None:
        """Fetch the next page; None means the API sent an empty response."""
        if not self.has_more_pages():
            raise RuntimeError("no more pages available")

        params = self._params.model_copy(update={"marker": self._next_marker})
        output = await self._client.describe_db_instances(params)

        self._first_page = False
        self._next_marker = output.marker if output is not None else None
        return output
