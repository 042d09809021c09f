"""
Pytest configuration and shared fixtures for airdrop tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_tree = _common.make_tree
make_ledger = _common.make_ledger
make_campaign = _common.make_campaign

from core.airdrop.clock import FixedClock
from core.airdrop.events import EventRecorder


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def clock():
    """Provide a fixed clock at T0."""
    return FixedClock(_common.T0)


@pytest.fixture
def tree():
    """Provide the two-leaf ALICE=100 / BOB=500 tree."""
    return make_tree()


@pytest.fixture
def ledger():
    """Provide a ledger with FUNDER holding 10_000 tokens."""
    return make_ledger()


@pytest.fixture
def events():
    """Provide an empty event recorder."""
    return EventRecorder()


@pytest.fixture
def campaign(tree, ledger, clock, events):
    """Provide a campaign over `tree` funded with 600 tokens."""
    return make_campaign(tree, ledger, clock, fund=600, events=events)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
