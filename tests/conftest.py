"""
Pytest configuration and shared fixtures for merkleforge tests.

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

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_digest = _common.make_digest
make_leaf_set = _common.make_leaf_set


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(params=["sha256", "keccak256"])
def algorithm(request):
    """Run a test once per supported algorithm."""
    return request.param


@pytest.fixture
def leaf_set(algorithm):
    """Provide a four-leaf LeafSet for the current algorithm."""
    return make_leaf_set(count=4, algorithm=algorithm)


@pytest.fixture
def isolated_cli_env(tmp_path, monkeypatch):
    """Run CLI tests without picking up real config files or env settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in [
        "MERKLEFORGE_ALGORITHM",
        "MERKLEFORGE_LEAF_COUNT",
        "MERKLEFORGE_TRACE",
        "MERKLEFORGE_LOG_LEVEL",
        "MERKLEFORGE_LOG_FILE",
        "MERKLEFORGE_OUTPUT_FORMAT",
    ]:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line interface"
    )
