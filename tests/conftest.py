"""Pytest configuration and fixtures for EasyDate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so easydate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from easydate import EasyDate  # noqa: E402


@pytest.fixture
def sample() -> EasyDate:
    """2012-01-02 13:22:56.789, a Monday."""
    return EasyDate(2012, 1, 2, 13, 22, 56, 789)
