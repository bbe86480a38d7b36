"""
Identifier classification.

A DB instance can be addressed by its platform-generated resource ID
("db-BE6UI2KLPQP3OVDYD74ZEV6NUM") or by its user-chosen identifier. The shape
check below is a heuristic: a user may well name an instance "db-something".
"""

from __future__ import annotations

import re

from .models import Classification

RESOURCE_ID_PATTERN = re.compile(r"db-[0-9A-Za-z]{2,255}")


def looks_like_resource_id(identifier: str) -> bool:
    """Return True if identifier has the shape of a DB instance resource ID."""
    return RESOURCE_ID_PATTERN.fullmatch(identifier) is not None


def classify(identifier: str) -> Classification:
    if looks_like_resource_id(identifier):
        return Classification.LOOKS_LIKE_RESOURCE_ID
    return Classification.LOOKS_LIKE_NAME
