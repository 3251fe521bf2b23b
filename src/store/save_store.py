"""Filesystem-backed save store.

This module is the single entry point callers use to persist values.
It maps slash-separated relative paths onto files beneath one
per-project root save directory and picks a codec per file extension.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from core.config import CheckpointConfig
from core.errors import CheckpointError, CheckpointIOError, CheckpointNotFoundError
from core.logging_config import get_logger
from core.types import StoreResult
from store.codecs import select_codec
from store.save_paths import ensure_directories
from store.tree_listing import list_save_files

_LOGGER = get_logger(__name__)


class SaveStore:
    """Per-project key/value store backed by the host filesystem.

    The root save directory is fixed when the store is created. Every
    relative path resolves beneath it by concatenation.
    """

    def __init__(self, config: CheckpointConfig) -> None:
        """Initialize the store and make sure its root directory exists.

        Args:
            config: Runtime configuration.

        Raises:
            CheckpointIOError: If the root save directory cannot be created.
        """
        self._project_title = config.project_title
        self._save_root = config.save_root
        try:
            self._save_root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise CheckpointIOError(
                f"Failed to create root save directory {self._save_root}: "
                f"{error.strerror or error}. Set CHECKPOINT_SAVE_ROOT to a writable directory."
            ) from error
        _LOGGER.info(
            "save_store_opened",
            project_title=self._project_title,
            save_root=str(self._save_root),
        )

    @property
    def project_title(self) -> str:
        """Project identifier the root save directory was resolved for."""
        return self._project_title

    @property
    def save_root(self) -> Path:
        """Absolute root save directory."""
        return self._save_root

    def read(self, path: str) -> Any:
        """Read and decode the value stored at a relative path.

        Args:
            path: Relative store path.

        Returns:
            Decoded value.

        Raises:
            CheckpointNotFoundError: If nothing is stored at the path.
            CheckpointIOError: If the file cannot be read.
            CheckpointDecodeError: If the file contents cannot be decoded.
        """
        absolute_path = self._absolute_path(path)
        if not self.exists(path):
            _LOGGER.debug("checkpoint_missing", path=path)
            raise CheckpointNotFoundError(f"{absolute_path}: No such file or directory")
        try:
            with absolute_path.open("rb") as file:
                data = file.read()
        except OSError as error:
            raise CheckpointIOError(
                f"Failed to read save file {absolute_path}: {error.strerror or error}."
            ) from error
        codec = select_codec(path)
        value = codec.decode(data)
        _LOGGER.debug("checkpoint_read", path=path, codec=codec.name, byte_count=len(data))
        return value

    def write(self, path: str, value: Any) -> None:
        """Encode a value and store it at a relative path.

        Missing ancestor directories are created first. An existing file is
        overwritten. Data is flushed to stable storage before returning.

        Args:
            path: Relative store path.
            value: Value compatible with the codec the path selects.

        Raises:
            CheckpointEncodeError: If the value cannot be encoded.
            CheckpointIOError: If directories or the file cannot be written.
        """
        codec = select_codec(path)
        data = codec.encode(value)
        ensure_directories(self._save_root, path)
        absolute_path = self._absolute_path(path)
        try:
            with absolute_path.open("wb") as file:
                file.write(data)
                file.flush()
                os.fsync(file.fileno())
        except OSError as error:
            raise CheckpointIOError(
                f"Failed to write save file {absolute_path}: {error.strerror or error}."
            ) from error
        _LOGGER.info("checkpoint_written", path=path, codec=codec.name, byte_count=len(data))

    def exists(self, path: str) -> bool:
        """Return whether any file or directory is stored at a relative path."""
        try:
            self._absolute_path(path).stat()
        except (OSError, ValueError):
            return False
        return True

    def list(self) -> list[str]:
        """List every stored file as a relative path in breadth-first order.

        Raises:
            CheckpointIOError: If a save directory cannot be scanned.
        """
        return list_save_files(self._save_root)

    def try_read(self, path: str) -> StoreResult:
        """Read a value, reporting failure as a result instead of raising.

        Args:
            path: Relative store path.

        Returns:
            Result holding the value on success or a diagnostic on failure.
        """
        try:
            value = self.read(path)
        except CheckpointError as error:
            return StoreResult(ok=False, error=str(error))
        return StoreResult(ok=True, value=value)

    def try_write(self, path: str, value: Any) -> StoreResult:
        """Write a value, reporting failure as a result instead of raising.

        Args:
            path: Relative store path.
            value: Value to store.

        Returns:
            Result with ``ok`` set on success or a diagnostic on failure.
        """
        try:
            self.write(path, value)
        except CheckpointError as error:
            _LOGGER.warning("checkpoint_write_failed", path=path, error=str(error))
            return StoreResult(ok=False, error=str(error))
        return StoreResult(ok=True)

    def _absolute_path(self, path: str) -> Path:
        return self._save_root / path


def open_store(config: CheckpointConfig | None = None) -> SaveStore:
    """Create a save store from explicit or environment configuration.

    Args:
        config: Optional runtime configuration.

    Returns:
        Ready-to-use save store.
    """
    return SaveStore(config or CheckpointConfig.from_env())
