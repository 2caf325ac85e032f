"""Pytest configuration and fixtures for db tests."""

import pytest


@pytest.fixture
def sample_table() -> str:
    """Sample table name for testing."""
    return "test_table"
