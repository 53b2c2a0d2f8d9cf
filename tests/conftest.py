"""Pytest configuration.

Ensures `src/` is on sys.path so tests can import `inistore` uninstalled,
and provides stores bound to a temporary base directory.
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from inistore import PathResolver, make_config  # noqa: E402


@pytest.fixture
def resolver(tmp_path):
    return PathResolver(str(tmp_path), "conf4test.py")


@pytest.fixture
def conf(resolver):
    store = make_config(resolver)
    store.initialize()
    return store
