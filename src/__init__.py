"""Instance Resolution - DB instance lookup by resource ID or identifier."""

__version__ = "0.1.0"
