"""Codec strategies and extension-based codec selection.

Each stored file is encoded by exactly one codec, chosen from the
extension of the path's leaf name. Structured extensions map to a
human-readable text codec; everything else uses the opaque pickle
codec, which supports a superset of Python value types.
"""

from __future__ import annotations

import json
import pickle
from typing import Any, Mapping, Protocol

from core.constants import EXTENSION_SEPARATOR, JSON_INDENT, STRUCTURED_EXTENSION, TEXT_ENCODING
from core.errors import CheckpointDecodeError, CheckpointEncodeError
from store.save_paths import split_path


class Codec(Protocol):
    """Encode and decode values against the raw bytes of a file."""

    name: str

    def encode(self, value: Any) -> bytes:
        """Serialize a value into file bytes."""
        ...

    def decode(self, data: bytes) -> Any:
        """Parse file bytes back into a value."""
        ...


class JsonCodec:
    """Structured codec storing UTF-8 JSON text."""

    name = "json"

    def encode(self, value: Any) -> bytes:
        """Serialize a JSON value tree.

        Args:
            value: Nested mappings, sequences, numbers, strings, booleans, or None.

        Returns:
            Indented UTF-8 JSON text with a trailing newline.

        Raises:
            CheckpointEncodeError: If the value holds a node JSON cannot represent.
        """
        try:
            text = json.dumps(value, indent=JSON_INDENT)
        except RecursionError as error:
            raise CheckpointEncodeError(
                "Failed to encode value as JSON: nesting is too deep. "
                "Flatten the value before storing it."
            ) from error
        except (TypeError, ValueError) as error:
            raise CheckpointEncodeError(
                f"Failed to encode value as JSON: {error}. "
                "Store only mappings, lists, strings, numbers, booleans, and None "
                "in .json paths, or use a path without the .json extension."
            ) from error
        return (text + "\n").encode(TEXT_ENCODING)

    def decode(self, data: bytes) -> Any:
        """Parse JSON text into a value tree.

        Raises:
            CheckpointDecodeError: If the bytes are not valid UTF-8 JSON.
        """
        try:
            return json.loads(data.decode(TEXT_ENCODING))
        except UnicodeDecodeError as error:
            raise CheckpointDecodeError(
                f"Failed to decode JSON file: invalid {TEXT_ENCODING} at byte {error.start}."
            ) from error
        except json.JSONDecodeError as error:
            raise CheckpointDecodeError(
                f"Failed to decode JSON file: {error.msg} "
                f"(line {error.lineno}, column {error.colno})."
            ) from error
        except RecursionError as error:
            raise CheckpointDecodeError(
                "Failed to decode JSON file: nesting is too deep."
            ) from error


class PickleCodec:
    """Opaque codec storing Python's native binary object encoding."""

    name = "pickle"

    def encode(self, value: Any) -> bytes:
        """Serialize any picklable value.

        Raises:
            CheckpointEncodeError: If pickle rejects the value.
        """
        try:
            return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError, RecursionError) as error:
            raise CheckpointEncodeError(f"Failed to encode value with pickle: {error}.") from error

    def decode(self, data: bytes) -> Any:
        """Restore a pickled value.

        Raises:
            CheckpointDecodeError: If the bytes are not a valid pickle stream.
        """
        try:
            return pickle.loads(data)
        except (
            pickle.UnpicklingError,
            EOFError,
            ValueError,
            TypeError,
            AttributeError,
            ImportError,
            IndexError,
            KeyError,
            RecursionError,
        ) as error:
            raise CheckpointDecodeError(
                f"Failed to decode pickle file: {error!r}. "
                "The file is truncated or was not written by this store."
            ) from error


JSON_CODEC = JsonCodec()
PICKLE_CODEC = PickleCodec()

STRUCTURED_CODECS: Mapping[str, Codec] = {STRUCTURED_EXTENSION: JSON_CODEC}
OPAQUE_CODEC: Codec = PICKLE_CODEC


def path_extension(path: str) -> str | None:
    """Return the text after the final dot of the leaf name, if any."""
    leaf = split_path(path).leaf
    _, separator, extension = leaf.rpartition(EXTENSION_SEPARATOR)
    if not separator:
        return None
    return extension


def select_codec(path: str) -> Codec:
    """Choose the codec for a relative store path.

    Args:
        path: Relative store path.

    Returns:
        The structured codec registered for the path's extension, or the
        opaque codec for every other extension, including none.
    """
    extension = path_extension(path)
    if extension is None:
        return OPAQUE_CODEC
    return STRUCTURED_CODECS.get(extension, OPAQUE_CODEC)
