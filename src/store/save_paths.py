"""Save path resolution and directory materialization.

This module maps relative store paths onto the filesystem: it resolves
the per-platform root save directory, splits relative paths into
directory segments and a leaf, and creates missing ancestor directories
before a write.
"""

from __future__ import annotations

import platform
import stat
from pathlib import Path

from platformdirs.api import PlatformDirsABC
from platformdirs.macos import MacOS
from platformdirs.unix import Unix
from platformdirs.windows import Windows

from core.constants import PATH_SEPARATOR
from core.errors import CheckpointConfigError, CheckpointIOError
from core.logging_config import get_logger
from core.types import PathComponents

_LOGGER = get_logger(__name__)

_PLATFORM_DIRS: dict[str, type[PlatformDirsABC]] = {
    "darwin": MacOS,
    "windows": Windows,
}


def split_path(path: str) -> PathComponents:
    """Split a relative store path into directories and a leaf.

    Args:
        path: Slash-separated path relative to the save root.

    Returns:
        Directory segments in root-to-leaf order plus the leaf name.
        A path without separators has no directories; a trailing
        separator yields an empty leaf.
    """
    *directories, leaf = path.split(PATH_SEPARATOR)
    return PathComponents(directories=tuple(directories), leaf=leaf)


def resolve_save_root(project_title: str, system: str | None = None) -> Path:
    """Resolve the per-platform root save directory for a project.

    Args:
        project_title: Project identifier used as the application name.
        system: OS identifier as reported by ``platform.system()``.
            Defaults to the current host.

    Returns:
        Absolute roaming user data directory for the project.

    Raises:
        CheckpointConfigError: If the platform data directory cannot be resolved.
    """
    system_name = (system or platform.system()).lower()
    dirs_type = _PLATFORM_DIRS.get(system_name, Unix)
    try:
        platform_dirs = dirs_type(appname=project_title, appauthor=False, roaming=True)
        return Path(platform_dirs.user_data_dir).expanduser().resolve()
    except (OSError, ValueError) as error:
        raise CheckpointConfigError(
            f"Failed to resolve save directory for '{project_title}' on {system_name}: {error}. "
            "Set CHECKPOINT_SAVE_ROOT to an explicit directory."
        ) from error


def ensure_directories(save_root: Path, path: str) -> None:
    """Create every missing ancestor directory of a relative path.

    Directories are visited root to leaf, so each one's parent exists
    by the time it is created.

    Args:
        save_root: Existing root save directory.
        path: Relative store path whose directories should exist.

    Raises:
        CheckpointIOError: If a directory cannot be created or a
            non-directory entry already occupies a directory segment.
    """
    directory_path = save_root
    for directory_name in split_path(path).directories:
        directory_path = directory_path / directory_name
        _ensure_directory(directory_path)


def _ensure_directory(directory_path: Path) -> None:
    """Create one directory unless it already exists."""
    try:
        mode = directory_path.stat().st_mode
    except FileNotFoundError:
        _create_directory(directory_path)
        return
    except OSError as error:
        raise CheckpointIOError(
            f"Failed to inspect save directory {directory_path}: {error.strerror or error}. "
            "Check permissions on the save root."
        ) from error
    if not stat.S_ISDIR(mode):
        raise _collision_error(directory_path)


def _create_directory(directory_path: Path) -> None:
    """Create a single directory whose parent already exists."""
    try:
        directory_path.mkdir()
    except FileExistsError as error:
        if directory_path.is_dir():
            return
        raise _collision_error(directory_path) from error
    except OSError as error:
        raise CheckpointIOError(
            f"Failed to create save directory {directory_path}: {error.strerror or error}. "
            "Check permissions on the save root."
        ) from error
    _LOGGER.debug("save_directory_created", directory=str(directory_path))


def _collision_error(directory_path: Path) -> CheckpointIOError:
    return CheckpointIOError(
        f"Cannot create save directory {directory_path}: a file already exists at that path. "
        "Write to a different path or move the conflicting file."
    )
