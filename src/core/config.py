"""Runtime configuration model for Checkpoint.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_PROJECT_TITLE,
    FORBIDDEN_TITLE_CHARACTERS,
    PROJECT_TITLE_ENV_VAR,
    RESERVED_TITLES,
    SAVE_ROOT_ENV_VAR,
    SYSTEM_ENV_VAR,
)
from core.errors import CheckpointConfigError
from store.save_paths import resolve_save_root


@dataclass(frozen=True)
class CheckpointConfig:
    """Validated runtime configuration.

    Attributes:
        project_title: Project identifier naming the save directory.
        save_root: Absolute root directory all store paths resolve under.
        system: Optional OS identifier used for root resolution.
    """

    project_title: str
    save_root: Path
    system: str | None = None

    @classmethod
    def from_env(cls) -> "CheckpointConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CheckpointConfigError: If environment values are invalid.
        """
        project_title = parse_project_title(
            os.getenv(PROJECT_TITLE_ENV_VAR, DEFAULT_PROJECT_TITLE)
        )
        system = os.getenv(SYSTEM_ENV_VAR) or None
        save_root_value = os.getenv(SAVE_ROOT_ENV_VAR)
        if save_root_value:
            save_root = Path(save_root_value).expanduser().resolve()
        else:
            save_root = resolve_save_root(project_title, system)
        return cls(project_title=project_title, save_root=save_root, system=system)


def parse_project_title(raw_value: str) -> str:
    """Validate a project title from the environment or the CLI.

    Args:
        raw_value: Raw title string.

    Returns:
        Stripped project title.

    Raises:
        CheckpointConfigError: If the title is empty, contains a separator,
            or is a relative directory name.
    """
    title = raw_value.strip()
    if not title:
        raise CheckpointConfigError(
            f"Invalid {PROJECT_TITLE_ENV_VAR} value: expected a non-empty title. "
            f"Unset {PROJECT_TITLE_ENV_VAR} or give it a project name."
        )
    if title in RESERVED_TITLES:
        raise CheckpointConfigError(
            f"Invalid {PROJECT_TITLE_ENV_VAR} value: '{raw_value}' names a relative directory. "
            "Use a plain project name such as 'my-game'."
        )
    if any(character in title for character in FORBIDDEN_TITLE_CHARACTERS):
        raise CheckpointConfigError(
            f"Invalid {PROJECT_TITLE_ENV_VAR} value: '{raw_value}' contains a path separator. "
            "Use a plain project name such as 'my-game'."
        )
    return title
