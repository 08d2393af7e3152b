"""
Repository-level pytest configuration.

Why this exists:
  - Live UI tests need a browser and the public demo site; keep them opt-in
    so a plain ``pytest`` run stays offline
  - Initialise logging once per session
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from autotest_tools.common import init_logger


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run tests marked 'live' against the real demo site (or set UI_LIVE=1)",
    )


def _live_enabled(config) -> bool:
    return config.getoption("--live") or os.getenv("UI_LIVE", "").lower() in ("1", "true", "yes")


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(config, items):
    if _live_enabled(config):
        return
    skip_live = pytest.mark.skip(reason="live UI test; run with --live or UI_LIVE=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


def pytest_sessionstart(session):
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
