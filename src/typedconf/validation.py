"""Rejection of configuration keys that would be ambiguous under dot-notation."""

from __future__ import annotations

import logging
from typing import Any

from typedconf.errors import ContainsDottedKeysError
from typedconf.path import DELIMITER

__all__ = ["find_dotted_keys", "validate"]

_logger = logging.getLogger(__name__)

_PATH_SEPARATOR = " => "


def find_dotted_keys(tree: dict[str, Any] | list[Any]) -> list[str]:
    """Return the ownership path of every key that contains the delimiter.

    Walks the tree depth-first. List indices appear in the paths but are never
    checked themselves. Each path is rendered with ' => ' between segments,
    e.g. ``"x => y => z.z"``.
    """
    dotted: list[list[str]] = []
    _walk(tree, [], dotted)
    return [_PATH_SEPARATOR.join(path) for path in dotted]


def _walk(node: dict[str, Any] | list[Any], path: list[str], dotted: list[list[str]]) -> None:
    items = node.items() if isinstance(node, dict) else enumerate(node)
    for key, value in items:
        if isinstance(key, str) and DELIMITER in key:
            dotted.append([*path, key])
        if isinstance(value, (dict, list)):
            _walk(value, [*path, str(key)], dotted)


def validate(tree: dict[str, Any], *, trusted: bool = False) -> dict[str, Any]:
    """Check that tree holds no dotted keys and return it unchanged.

    A key such as ``"a.b"`` cannot be told apart from ``{"a": {"b": ...}}``
    once paths are written with dots, so such trees are refused as a whole.

    Args:
        tree: The configuration tree.
        trusted: Skip the walk for data already known to be valid, such as a
            previously validated tree loaded from a cache. Never pass True for
            data from an untrusted source.

    Raises:
        ContainsDottedKeysError: Listing every offending key, not just the first.
    """
    if trusted:
        _logger.debug("Skipping dotted-key validation for trusted configuration")
        return tree

    dotted = find_dotted_keys(tree)
    if dotted:
        raise ContainsDottedKeysError(dotted)

    _logger.debug("Configuration passed dotted-key validation (%d top-level keys)", len(tree))
    return tree
