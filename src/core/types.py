"""Shared typed models.

This module defines immutable data models used by the save path,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PathComponents:
    """Decomposed relative store path.

    Attributes:
        directories: Directory segments in root-to-leaf order.
        leaf: Final file name segment, possibly empty.
    """

    directories: tuple[str, ...]
    leaf: str


@dataclass(frozen=True)
class StoreResult:
    """Two-part outcome of a non-raising store operation.

    Attributes:
        ok: Whether the operation succeeded.
        value: Decoded value for successful reads, otherwise None.
        error: Human-readable diagnostic for failures, otherwise None.
    """

    ok: bool
    value: Any = None
    error: str | None = None
