"""Pytest configuration and shared fixtures for all tests."""

from pathlib import Path

import pytest

TEST_DATA_DIR = Path(__file__).parent / "test-data"


@pytest.fixture
def test_data_dir() -> Path:
    """Directory holding the sample SBOM documents."""
    return TEST_DATA_DIR
