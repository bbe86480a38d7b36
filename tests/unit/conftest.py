"""
Pytest configuration for unit tests.

Keeps unit tests independent of the developer's environment.
"""

import os


def pytest_configure(config):
    """Disable telemetry export and drop instance resolution overrides."""
    # get_tracer() falls back to the no-op tracer when the SDK is disabled
    os.environ["OTEL_SDK_DISABLED"] = "true"

    for key in list(os.environ):
        if key.startswith("INSTANCE_"):
            del os.environ[key]
