"""
Describe backends, one per management API client generation.
"""

from .v1 import DescribeBackendV1
from .v2 import DescribeBackendV2

__all__ = ["DescribeBackendV1", "DescribeBackendV2"]
