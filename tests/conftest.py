"""Root conftest for test suite - adds src and the repository root to Python path."""

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent

# src/ for voice_search, repository root for tests.mocks
for path in (repo_root / "src", repo_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Directories whose tests never touch the network
_UNIT_DIRS = {"unit", "pipeline"}


def pytest_collection_modifyitems(items):
    """Automatically mark tests under unit/ and pipeline/ as unit tests."""
    tests_dir = Path(__file__).parent
    for item in items:
        item_path = Path(item.fspath)
        if item_path.parent.parent == tests_dir and item_path.parent.name in _UNIT_DIRS:
            item.add_marker(pytest.mark.unit)
