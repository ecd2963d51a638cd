# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

Automatically applies the ``unit`` marker to every test under tests/unit/
so unit tests can be selected with ``pytest -m unit``.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to all tests in the unit directory.

    ``pytestmark`` in a conftest.py does not apply to tests in other files,
    so the marker is added at collection time instead.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
