"""
Management API clients.

- RdsClientV1: dict requests/records, callback pagination, coded ApiError faults
- RdsClientV2: pydantic models, pull-based paginator, typed faults
"""

from .base import DB_INSTANCE_NOT_FOUND, ManagementApiClient
from .v1 import RdsClientV1
from .v2 import (
    DBInstance,
    DBInstanceNotFoundFault,
    DescribeDBInstancesInput,
    DescribeDBInstancesOutput,
    DescribeDBInstancesPaginator,
    RdsClientV2,
)

__all__ = [
    "DB_INSTANCE_NOT_FOUND",
    "DBInstance",
    "DBInstanceNotFoundFault",
    "DescribeDBInstancesInput",
    "DescribeDBInstancesOutput",
    "DescribeDBInstancesPaginator",
    "ManagementApiClient",
    "RdsClientV1",
    "RdsClientV2",
]
