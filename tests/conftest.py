"""Shared test fixtures."""

import pytest


@pytest.fixture
def output_dir(tmp_path):
    """Temporary output directory for fixture file writes."""
    return tmp_path / "tests" / "expected"
