"""Checkpoint CLI entry points.
This module exposes commands for inspecting and editing a save store.
It maps argparse commands onto SaveStore calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import CheckpointConfig, parse_project_title
from core.errors import CheckpointError
from store.save_paths import resolve_save_root
from store.save_store import SaveStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="checkpoint", description="Checkpoint save store CLI")
    parser.add_argument("--project", help="Override CHECKPOINT_PROJECT_TITLE for this command")
    parser.add_argument("--save-root", help="Override CHECKPOINT_SAVE_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_list_command(subparsers)
    _add_exists_command(subparsers)
    _add_read_command(subparsers)
    _add_write_command(subparsers)
    _add_where_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Checkpoint CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args.project, args.save_root)
        if args.command == "list":
            return _run_list_command(store)
        if args.command == "exists":
            return _run_exists_command(store, args)
        if args.command == "read":
            return _run_read_command(store, args)
        if args.command == "write":
            return _run_write_command(store, args)
        if args.command == "where":
            print(store.save_root)
            return 0
    except CheckpointError as error:
        print(f"checkpoint: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_store(project: str | None, save_root: str | None) -> SaveStore:
    """Build a save store with optional project and root overrides.

    Args:
        project: Optional project title override.
        save_root: Optional root directory override.

    Returns:
        Configured save store.
    """
    config = CheckpointConfig.from_env()
    if project:
        project_title = parse_project_title(project)
        config = replace(
            config,
            project_title=project_title,
            save_root=resolve_save_root(project_title, config.system),
        )
    if save_root:
        config = replace(config, save_root=Path(save_root).expanduser().resolve())
    return SaveStore(config)


def _run_list_command(store: SaveStore) -> int:
    for path in store.list():
        print(path)
    return 0


def _run_exists_command(store: SaveStore, args: argparse.Namespace) -> int:
    """Handle exists command; exit status mirrors the answer."""
    found = store.exists(args.path)
    print("true" if found else "false")
    return 0 if found else 1


def _run_read_command(store: SaveStore, args: argparse.Namespace) -> int:
    """Handle read command.

    Args:
        store: Save store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    value = store.read(args.path)
    print(_render_value(value))
    return 0


def _render_value(value: Any) -> str:
    """Render a stored value as sorted JSON, or its repr when JSON cannot hold it."""
    try:
        return json.dumps(value, indent=2, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        return repr(value)


def _run_write_command(store: SaveStore, args: argparse.Namespace) -> int:
    """Handle write command.

    Args:
        store: Save store.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as error:
        print(
            f"checkpoint: VALUE must be JSON text: {error.msg}. "
            "Quote strings, e.g. '\"hello\"'.",
            file=sys.stderr,
        )
        return 2
    store.write(args.path, value)
    print(args.path)
    return 0


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="List every stored path, breadth first")


def _add_exists_command(subparsers: Any) -> None:
    """Register exists subcommand."""
    parser = subparsers.add_parser("exists", help="Check whether a path is stored")
    parser.add_argument("path", help="Relative store path, e.g. slots/1/state.json")


def _add_read_command(subparsers: Any) -> None:
    """Register read subcommand."""
    parser = subparsers.add_parser("read", help="Print the value stored at a path")
    parser.add_argument("path", help="Relative store path")


def _add_write_command(subparsers: Any) -> None:
    """Register write subcommand."""
    parser = subparsers.add_parser("write", help="Store a JSON value at a path")
    parser.add_argument("path", help="Relative store path")
    parser.add_argument("value", help="Value as JSON text")


def _add_where_command(subparsers: Any) -> None:
    """Register where subcommand."""
    subparsers.add_parser("where", help="Print the resolved root save directory")
