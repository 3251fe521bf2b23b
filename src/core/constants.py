"""Core constants used across Checkpoint modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_PROJECT_TITLE = "checkpoint"
PATH_SEPARATOR = "/"
EXTENSION_SEPARATOR = "."
STRUCTURED_EXTENSION = "json"
JSON_INDENT = 2
TEXT_ENCODING = "utf-8"
PROJECT_TITLE_ENV_VAR = "CHECKPOINT_PROJECT_TITLE"
SAVE_ROOT_ENV_VAR = "CHECKPOINT_SAVE_ROOT"
SYSTEM_ENV_VAR = "CHECKPOINT_SYSTEM"
FORBIDDEN_TITLE_CHARACTERS = ("/", "\\")
RESERVED_TITLES = (".", "..")
