"""Shared test fixtures for feature-closure.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "featclosure"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def feature_map() -> dict[str, list[str]]:
    """A small crate-style feature map with a qualified dependency flag."""
    return {
        "default": ["tls"],
        "resolvable": ["feature1", "tls/extra_feature"],
        "feature1": [],
        "extra": [],
    }
