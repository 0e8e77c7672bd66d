"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(scope="session")
def foobar():
    """Fixture providing the b"foobar" sample and its hex form."""
    return {
        "raw": b"foobar",
        "hex": "666f6f626172",
        "hex_upper": "666F6F626172",
    }
