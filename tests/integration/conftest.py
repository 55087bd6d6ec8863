"""Integration test configuration.

These tests talk to a real Postgres with migrations applied
(`python scripts/run_migrations.py`). They are skipped unless
DATABASE__URL is exported.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def _require_database():
    if not os.environ.get("DATABASE__URL"):
        pytest.skip("DATABASE__URL not set, Postgres integration tests skipped")
