"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from tertian.shorthand import QualityLoader, ShorthandParser


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test vocabularies."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def parser() -> ShorthandParser:
    """Parser over the built-in vocabulary."""
    return ShorthandParser(QualityLoader().load())
