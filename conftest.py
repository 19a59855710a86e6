"""Pytest configuration for the porutham engine."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``PORUTHAM_HOME`` at a per-test directory."""

    home = tmp_path / "porutham-home"
    monkeypatch.setenv("PORUTHAM_HOME", str(home))
    return home
