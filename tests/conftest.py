"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import pq_async...' and
'import main' work without installing the package.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PQ_ASYNC_* variable so settings tests start from defaults."""
    for name in (
        "PQ_ASYNC_NUMERIC_LOCALE",
        "PQ_ASYNC_NUMERIC_GROUPING",
        "PQ_ASYNC_LOG_LEVEL",
        "PQ_ASYNC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
