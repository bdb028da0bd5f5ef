"""Root pytest configuration for all tests.

Registers the custom markers used across the suite so runs with
``--strict-markers`` do not fail on them.
"""

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register project markers.

    golden: regression locks on pinned rasterizer output
        (shared/golden_traces.py). Select with ``pytest -m golden``.
    """
    config.addinivalue_line(
        "markers", "golden: pinned rasterizer output from shared/golden_traces.py"
    )
