"""Public SDK surface for Checkpoint.

This module provides a stable import path for host applications.
It re-exports the save store, its configuration, and error types.
"""

from __future__ import annotations

from core.config import CheckpointConfig
from core.errors import (
    CheckpointConfigError,
    CheckpointDecodeError,
    CheckpointEncodeError,
    CheckpointError,
    CheckpointIOError,
    CheckpointNotFoundError,
)
from core.types import PathComponents, StoreResult
from store.codecs import Codec, select_codec
from store.save_paths import resolve_save_root, split_path
from store.save_store import SaveStore, open_store

__all__ = [
    "CheckpointConfig",
    "CheckpointConfigError",
    "CheckpointDecodeError",
    "CheckpointEncodeError",
    "CheckpointError",
    "CheckpointIOError",
    "CheckpointNotFoundError",
    "Codec",
    "PathComponents",
    "SaveStore",
    "StoreResult",
    "open_store",
    "resolve_save_root",
    "select_codec",
    "split_path",
]
