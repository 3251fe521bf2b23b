"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from core.config import CheckpointConfig
from store.save_store import SaveStore


def _run(tmp_path, capsys, *args: str) -> tuple[int, str, str]:
    exit_code = main(["--save-root", str(tmp_path), *args])
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


def test_cli_write_then_read_json(tmp_path, capsys) -> None:
    """CLI write should store a value that read prints back as JSON."""
    _run(tmp_path, capsys, "write", "slots/1/state.json", '{"turn": 4}')

    exit_code, output, _ = _run(tmp_path, capsys, "read", "slots/1/state.json")

    assert exit_code == 0 and json.loads(output) == {"turn": 4}


def test_cli_write_opaque_path_uses_pickle(tmp_path, capsys) -> None:
    """Paths without .json are written with the opaque codec."""
    exit_code, output, _ = _run(tmp_path, capsys, "write", "save.bin", "[1, 2]")

    assert exit_code == 0 and output.strip() == "save.bin"
    assert (tmp_path / "save.bin").read_bytes().startswith(b"\x80")


def test_cli_list_prints_one_path_per_line(tmp_path, capsys) -> None:
    """CLI list should print every stored path."""
    _run(tmp_path, capsys, "write", "x.bin", "1")
    _run(tmp_path, capsys, "write", "d/y.json", "2")

    exit_code, output, _ = _run(tmp_path, capsys, "list")

    assert exit_code == 0 and output.splitlines() == ["x.bin", "d/y.json"]


def test_cli_exists_exit_code_mirrors_answer(tmp_path, capsys) -> None:
    """exists prints the answer and fails when the path is absent."""
    exit_code, output, _ = _run(tmp_path, capsys, "exists", "nothing.json")

    assert exit_code == 1 and output.strip() == "false"


def test_cli_read_missing_reports_error(tmp_path, capsys) -> None:
    """Store errors become a diagnostic on stderr and exit code 1."""
    exit_code, _, error_output = _run(tmp_path, capsys, "read", "nothing.json")

    assert exit_code == 1 and "No such file or directory" in error_output


def test_cli_write_rejects_non_json_value(tmp_path, capsys) -> None:
    """VALUE must be JSON text."""
    exit_code, _, error_output = _run(tmp_path, capsys, "write", "a.json", "not json")

    assert exit_code == 2 and "VALUE must be JSON" in error_output


def test_cli_where_prints_save_root(tmp_path, capsys) -> None:
    """where prints the resolved root directory."""
    exit_code, output, _ = _run(tmp_path, capsys, "where")

    assert exit_code == 0 and output.strip() == str(tmp_path.resolve())


def test_cli_project_resolves_platform_root(tmp_path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    """--project picks the platform data directory for that title."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setenv("CHECKPOINT_SYSTEM", "Linux")

    exit_code = main(["--project", "other-game", "where"])
    output = capsys.readouterr().out

    assert exit_code == 0 and output.strip() == str((tmp_path / "other-game").resolve())


@pytest.mark.parametrize("value", [{1: "a", "b": 2}, {(1, 2): 3}])
def test_cli_read_prints_repr_for_non_json_keys(tmp_path, capsys, value) -> None:
    """Pickled mappings with keys JSON cannot sort or hold fall back to repr."""
    SaveStore(CheckpointConfig(project_title="demo", save_root=tmp_path)).write("keys.bin", value)

    exit_code, output, _ = _run(tmp_path, capsys, "read", "keys.bin")

    assert exit_code == 0 and output.strip() == repr(value)


@pytest.mark.parametrize("project", ["..", "../escaped", "  "])
def test_cli_project_rejects_invalid_title(tmp_path, capsys, project: str) -> None:
    """An invalid --project is reported without a traceback."""
    exit_code = main(["--project", project, "where"])
    error_output = capsys.readouterr().err

    assert exit_code == 1 and error_output.startswith("checkpoint: Invalid")
