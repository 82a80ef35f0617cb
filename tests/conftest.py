"""
Shared test fixtures for the rop test suite.

structlog keeps global configuration; it is reset around every test so a
test that calls configure_structlog() cannot change what another test
captures with structlog.testing.capture_logs.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture()
def project_root() -> Path:
    """Return the absolute path to the project root."""
    return PROJECT_ROOT
