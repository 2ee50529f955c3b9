"""Shared pytest fixtures and configuration for the life-calc test suite.

Guidelines
----------
* No test touches the real home directory — the store path is
  redirected into ``tmp_path`` for every test.
* The clock is always fixed; core tests pass ``now`` explicitly.
* questionary is mocked; no test needs a real terminal.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(autouse=True)
def store_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI's date store at a per-test temporary file."""
    path = tmp_path / "store" / "dates.json"
    monkeypatch.setenv("LIFE_CALC_STORE_PATH", str(path))
    return path


@pytest.fixture
def fixed_system_clock(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Freeze :class:`SystemClock` at :data:`FIXED_NOW`."""
    from life_calc.infra.clock import SystemClock

    monkeypatch.setattr(SystemClock, "now", lambda self: FIXED_NOW)
    return FIXED_NOW
