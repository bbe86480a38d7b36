"""
Pytest fixtures for instance resolution tests.
"""

from __future__ import annotations

import pytest

from tests.unit.services.instance_resolution.fakes import FakeManagementApi, ScriptedBackend


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
def api() -> FakeManagementApi:
    return FakeManagementApi()
