"""Breadth-first enumeration of stored files.

This module walks the save root and reports every regular file as a
root-relative store path in breadth-first discovery order.
"""

from __future__ import annotations

from collections import deque
import os
from pathlib import Path

from core.constants import PATH_SEPARATOR
from core.errors import CheckpointIOError


def list_save_files(save_root: Path) -> list[str]:
    """List every stored file beneath the save root.

    Directories are visited in FIFO order starting from the root. Entries
    that are neither regular files nor directories, symlinks included,
    are skipped.

    Args:
        save_root: Root save directory.

    Returns:
        Root-relative file paths, each reported once. Empty if the root
        is empty or absent.

    Raises:
        CheckpointIOError: If a directory cannot be scanned.
    """
    if not save_root.is_dir():
        return []
    file_paths: list[str] = []
    pending_directories: deque[str] = deque([""])
    while pending_directories:
        directory_prefix = pending_directories.popleft()
        for entry_name, entry_kind in _scan_directory(save_root / directory_prefix):
            relative_path = directory_prefix + entry_name
            if entry_kind == "file":
                file_paths.append(relative_path)
            elif entry_kind == "directory":
                pending_directories.append(relative_path + PATH_SEPARATOR)
    return file_paths


def _scan_directory(directory_path: Path) -> list[tuple[str, str]]:
    """Read one directory's entries with their type classification."""
    try:
        with os.scandir(directory_path) as entries:
            return [(entry.name, _classify_entry(entry)) for entry in entries]
    except OSError as error:
        raise CheckpointIOError(
            f"Failed to list save directory {directory_path}: {error.strerror or error}. "
            "Check permissions on the save root."
        ) from error


def _classify_entry(entry: os.DirEntry[str]) -> str:
    if entry.is_file(follow_symlinks=False):
        return "file"
    if entry.is_dir(follow_symlinks=False):
        return "directory"
    return "other"
