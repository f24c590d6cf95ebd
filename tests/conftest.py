"""
Pytest configuration and shared fixtures for anys-cid tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import os
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

make_payload = _common.make_payload
make_cid = _common.make_cid
write_temp_file = _common.write_temp_file


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sample_cid():
    """Provide the Cid(version='A', size=10, hash=[1; 32]) used across codec tests."""
    return make_cid()


@pytest.fixture
def temp_file_factory():
    """Create temporary files with given contents; removed after the test."""
    paths: list[str] = []

    def _make(data: bytes) -> str:
        path = write_temp_file(data)
        paths.append(path)
        return path

    yield _make

    for path in paths:
        if os.path.exists(path):
            os.remove(path)


@pytest.fixture(autouse=True)
def _isolate_anys_env(monkeypatch):
    """Keep ANYS_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("ANYS_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
