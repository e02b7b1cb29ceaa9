"""Pytest-bdd configuration and shared fixtures for receipt feature tests."""

import pytest


@pytest.fixture
def context():
    """Shared test context for scenario state."""
    return {
        "items": [],
        "options": {},
        "rates": {},
        "lines": None,
    }
