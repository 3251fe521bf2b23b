"""Checkpoint exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure point of the save store raises a specific error type.
"""

from __future__ import annotations


class CheckpointError(Exception):
    """Base exception for all Checkpoint failures."""


class CheckpointConfigError(CheckpointError):
    """Raised for invalid runtime configuration."""


class CheckpointNotFoundError(CheckpointError):
    """Raised when reading a path that has no stored entry."""


class CheckpointIOError(CheckpointError):
    """Raised for directory and file failures at the OS boundary."""


class CheckpointEncodeError(CheckpointError):
    """Raised when a value cannot be serialized by the selected codec."""


class CheckpointDecodeError(CheckpointError):
    """Raised when stored bytes cannot be parsed by the selected codec."""
