"""
Shared pytest fixtures and configuration for envfallback tests.

Record classes and store fixtures live in ``tests/fixtures/record_fixtures.py``
and are re-exported here so every test module can request them.
"""

import sys
from pathlib import Path

import pytest

# Ensure local repo paths win for imports.
_REPO_ROOT = Path(__file__).resolve().parent.parent
# Put `src/` first so `import envfallback` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(1, str(_REPO_ROOT))

from envfallback.core.utils.logger import reset_logging  # noqa: E402

from tests.fixtures.record_fixtures import (  # noqa: E402,F401
    app_config,
    clean_environ,
    edge_config,
    empty_store,
)


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Give every test a package logger without handlers."""
    reset_logging()
    yield
    reset_logging()
