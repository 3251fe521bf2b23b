"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import CheckpointConfig, parse_project_title
from core.errors import CheckpointConfigError


def test_from_env_defaults_project_title() -> None:
    """Config should fall back to the default project title."""
    config = CheckpointConfig.from_env()

    assert config.project_title == "checkpoint"


def test_from_env_resolves_platform_save_root(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should place the save root in the platform data directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setenv("CHECKPOINT_PROJECT_TITLE", "demo-game")
    monkeypatch.setenv("CHECKPOINT_SYSTEM", "Linux")

    config = CheckpointConfig.from_env()

    assert config.save_root == (tmp_path / "demo-game").resolve()


def test_from_env_reads_save_root_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should honor an explicit save root."""
    monkeypatch.setenv("CHECKPOINT_SAVE_ROOT", "./.tmp-checkpoint")

    config = CheckpointConfig.from_env()

    assert config.save_root.name == ".tmp-checkpoint" and config.save_root.is_absolute()


def test_from_env_strips_project_title(monkeypatch: pytest.MonkeyPatch) -> None:
    """Surrounding whitespace should not leak into the title."""
    monkeypatch.setenv("CHECKPOINT_PROJECT_TITLE", "  spaced  ")

    config = CheckpointConfig.from_env()

    assert config.project_title == "spaced"


@pytest.mark.parametrize("title", ["", "   ", "nested/title", "windows\\title"])
def test_from_env_raises_for_invalid_title(title: str, monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject empty titles and titles with separators."""
    monkeypatch.setenv("CHECKPOINT_PROJECT_TITLE", title)

    with pytest.raises(CheckpointConfigError):
        CheckpointConfig.from_env()


@pytest.mark.parametrize("title", [".", "..", " .. "])
def test_from_env_raises_for_relative_directory_title(
    title: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Titles naming the current or parent directory are rejected."""
    monkeypatch.setenv("CHECKPOINT_PROJECT_TITLE", title)

    with pytest.raises(CheckpointConfigError, match="relative directory"):
        CheckpointConfig.from_env()


def test_parse_project_title_accepts_dotted_names() -> None:
    """Dots inside a title are fine."""
    assert parse_project_title("my.game") == "my.game"
