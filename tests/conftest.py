"""Pytest configuration.

The repository uses a `src/` layout. This conftest ensures tests can import the `temporis` package
when running `pytest` locally without installing it.
"""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure `import temporis` works when running pytest without installing the package.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def reference() -> date:
    """Tuesday, 16 January 2024."""

    return date(2024, 1, 16)
