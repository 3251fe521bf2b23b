"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolated_checkpoint_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment-driven config away from the real user data directory."""
    for name in ("CHECKPOINT_PROJECT_TITLE", "CHECKPOINT_SAVE_ROOT", "CHECKPOINT_SYSTEM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
