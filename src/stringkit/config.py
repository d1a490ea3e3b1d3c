"""Configuration utilities for STRINGKIT.

This module centralizes small helpers and constants related to configuration:
the replacement pass cap and loading pattern maps from JSON files.
"""

import json
import os
from pathlib import Path

REPLACE_PASSES = 2  # pragma: no mutate
MAPPING_FILE_ENV = "STRINGKIT_MAPPING_FILE"  # pragma: no mutate


class MappingFileNotSetError(Exception):
    """Raised when the STRINGKIT_MAPPING_FILE environment variable is not set."""


class InvalidMappingError(Exception):
    """Raised when a mapping file cannot be read as a pattern → replacement map."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid mapping file '{path}': {reason}")
        self.path = path
        self.reason = reason


def get_mapping_path() -> Path:
    """Get the mapping file path from the environment.

    Returns:
        The value of the `STRINGKIT_MAPPING_FILE` environment variable as a path.

    Raises:
        MappingFileNotSetError: If `STRINGKIT_MAPPING_FILE` is not set.
    """
    if not (path := os.environ.get(MAPPING_FILE_ENV)):
        raise MappingFileNotSetError
    return Path(path)


def load_mapping(path: Path) -> dict[str, str]:
    """Load a pattern → replacement map from a JSON file.

    The file must hold a single JSON object whose keys and values are all
    strings, e.g. ``{"colour": "color", "grey": "gray"}``.

    Args:
        path: Location of the UTF-8 encoded JSON file.

    Returns:
        The mapping as a plain dict.

    Raises:
        InvalidMappingError: If the file cannot be read, is not valid JSON,
            or does not contain a string → string object.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidMappingError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise InvalidMappingError(
            path, f"not valid UTF-8 (byte {e.start})"
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidMappingError(path, f"not valid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        raise InvalidMappingError(path, "top-level value must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise InvalidMappingError(
                path, f"replacement for {key!r} must be a string"
            )
    return data
