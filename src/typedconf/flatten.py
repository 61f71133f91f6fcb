"""Conversion between nested configuration trees and flat path-keyed maps."""

from __future__ import annotations

import copy
from typing import Any

from typedconf.path import DELIMITER

__all__ = ["flatten", "unflatten"]


def flatten(tree: dict[str, Any] | list[Any], delimiter: str = DELIMITER) -> dict[str, Any]:
    """Flatten a tree into a single-level dict keyed by full paths.

    Non-empty containers are expanded. Scalars and empty containers are
    leaves and appear verbatim. List entries are keyed by their index.

    Example:
        >>> flatten({"a": {"b": 1, "c": []}, "d": ["x"]})
        {'a.b': 1, 'a.c': [], 'd.0': 'x'}
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    flat: dict[str, Any] = {}
    _flatten_into(flat, tree, "", delimiter)
    return flat


def _flatten_into(flat: dict[str, Any], node: dict[str, Any] | list[Any], prefix: str, delimiter: str) -> None:
    items = node.items() if isinstance(node, dict) else enumerate(node)
    for key, value in items:
        full_key = f"{prefix}{key}"
        if isinstance(value, (dict, list)) and value:
            _flatten_into(flat, value, full_key + delimiter, delimiter)
        else:
            flat[full_key] = copy.deepcopy(value)


def unflatten(flat: dict[str, Any], delimiter: str = DELIMITER) -> dict[str, Any]:
    """Re-nest a flat path-keyed dict produced by flatten().

    Maps whose keys are exactly ``"0"`` to ``"n-1"`` in order are turned back
    into lists, so ``unflatten(flatten(tree)) == tree`` for trees that have no
    maps keyed like list indices and no keys containing the delimiter.

    Raises:
        ValueError: If one key is both a leaf and the parent of another key.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    root: dict[str, Any] = {}
    # ids of the dicts built here, as opposed to empty-map leaves copied from flat
    branches: set[int] = {id(root)}

    for flat_key, value in flat.items():
        segments = flat_key.split(delimiter)
        current = root
        for depth, segment in enumerate(segments[:-1]):
            if segment not in current:
                current[segment] = {}
                branches.add(id(current[segment]))
            child = current[segment]
            if id(child) not in branches:
                raise ValueError(
                    f"Key '{flat_key}' conflicts with a value at "
                    f"'{delimiter.join(segments[: depth + 1])}'"
                )
            current = child
        if segments[-1] in current:
            raise ValueError(f"Key '{flat_key}' conflicts with an existing branch")
        current[segments[-1]] = copy.deepcopy(value)

    for key, value in root.items():
        if id(value) in branches:
            root[key] = _listify(value, branches)
    return root


def _listify(node: dict[str, Any], branches: set[int]) -> dict[str, Any] | list[Any]:
    for key, value in node.items():
        if id(value) in branches:
            node[key] = _listify(value, branches)
    if list(node) == [str(i) for i in range(len(node))]:
        return list(node.values())
    return node
