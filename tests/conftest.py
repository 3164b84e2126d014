"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import pocketkit...' works
without installing the package, and provides shared clock fixtures.
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from pocketkit.utils.time import FrozenClock, ManualClock  # noqa: E402

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock():
    """Clock pinned to FIXED_NOW."""
    return FrozenClock(FIXED_NOW)


@pytest.fixture
def manual_clock():
    """Clock starting at FIXED_NOW that only moves via advance()."""
    return ManualClock(FIXED_NOW)
