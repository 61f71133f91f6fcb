"""Dot-delimited path resolution over a configuration tree."""

from __future__ import annotations

import re
from typing import Any

from typedconf.errors import InvalidPathError, KeyNotFoundError
from typedconf.tree import is_container, render_scalar

__all__ = ["DELIMITER", "split_path", "resolve"]

DELIMITER = "."

_INDEX_PATTERN = re.compile(r"^(0|[1-9][0-9]*)$")

_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a path into its segments.

    Surrounding whitespace is ignored. Segments are otherwise taken literally,
    so spaces inside a segment are fine.

    Raises:
        InvalidPathError: If the path is empty or would produce an empty segment.
    """
    path = path.strip()
    if not path:
        raise InvalidPathError(path, "Config key cannot be an empty string.")
    if DELIMITER * 2 in path:
        raise InvalidPathError(
            path, f"Key '{path}' is invalid. Keys cannot contain consecutive dots."
        )
    segments = path.split(DELIMITER)
    if not segments[0] or not segments[-1]:
        raise InvalidPathError(
            path, f"Key '{path}' is invalid. Keys cannot start or end with a dot."
        )
    return segments


def _child(container: dict[str, Any] | list[Any], segment: str) -> Any:
    if isinstance(container, dict):
        return container.get(segment, _MISSING)
    if _INDEX_PATTERN.match(segment):
        index = int(segment)
        if index < len(container):
            return container[index]
    return _MISSING


def resolve(tree: dict[str, Any], path: str) -> Any:
    """Return the value stored at path, of whatever kind.

    Map keys are matched literally; list entries are addressed by their
    decimal index. The tree is never modified.

    Raises:
        InvalidPathError: If the path is malformed.
        KeyNotFoundError: If a segment is missing, or a scalar sits where a
            container is needed to keep descending.
    """
    segments = split_path(path)
    full_path = DELIMITER.join(segments)
    current: dict[str, Any] | list[Any] = tree

    for idx, segment in enumerate(segments):
        sub_path = DELIMITER.join(segments[: idx + 1])
        value = _child(current, segment)

        if value is _MISSING:
            raise KeyNotFoundError(full_path, sub_path)

        if idx == len(segments) - 1:
            return value

        if not is_container(value):
            raise KeyNotFoundError(full_path, sub_path, found_value=render_scalar(value))

        current = value

    raise AssertionError("unreachable: the loop always returns or raises")
