"""Typed, dot-path access to a validated configuration tree.

Two views are provided:

- ``Config``: strict. A missing key or a value of the wrong kind always raises.
- ``NullableConfig``: same accessors, but a value that is present and null
  comes back as ``None`` instead of failing the type check.

Every ``Config`` carries a ``nullable`` companion over the same tree::

    config = Config({"ports": {"http": 80}, "proxy": None})
    config.int("ports.http")        # 80
    config.nullable.string("proxy")  # None
    config.string("proxy")           # raises TypeMismatchError
"""

from __future__ import annotations

import builtins
import copy
import logging
from typing import Any

from typedconf.errors import TypeMismatchError
from typedconf.flatten import flatten
from typedconf.path import DELIMITER, resolve
from typedconf.tree import check_root, check_tree, kind_name
from typedconf.validation import validate

__all__ = ["NullableConfig", "Config"]

_logger = logging.getLogger(__name__)


def _as_string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(key, "string", kind_name(value))
    return value


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatchError(key, "bool", kind_name(value))
    return value


def _as_int(key: str, value: Any) -> int:
    # bool is an int subclass but never an acceptable int here
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatchError(key, "int", kind_name(value))
    return value


def _as_float(key: str, value: Any) -> float:
    if not isinstance(value, float):
        raise TypeMismatchError(key, "float", kind_name(value))
    return value


def _as_list(key: str, value: Any) -> list[Any]:
    """An empty map is also an empty list."""
    if isinstance(value, list):
        return value
    if isinstance(value, dict) and not value:
        return []
    raise TypeMismatchError(key, "list", kind_name(value))


def _as_map(key: str, value: Any) -> dict[str, Any]:
    """An empty list is also an empty map. Every key must be a string."""
    if isinstance(value, list) and not value:
        return {}
    if not isinstance(value, dict):
        raise TypeMismatchError(key, "map", kind_name(value))
    if not all(isinstance(k, str) for k in value):
        raise TypeMismatchError(key, "map", "map with non-string keys")
    return value


class NullableConfig:
    """Typed accessors that return None when the value at a path is null.

    Lookup failures are never swallowed: a path that does not resolve raises
    KeyNotFoundError here just as it does on the strict view. Only a value that
    is present and null is turned into None.
    """

    def __init__(self, data: dict[str, Any] | None = None, *, trusted: builtins.bool = False) -> None:
        """Copy and validate data.

        Args:
            data: The configuration tree. None means an empty tree.
            trusted: Skip the shape and dotted-key checks for data already
                known to be valid (e.g. a cached tree that passed them before).

        Raises:
            InvalidTreeError: If data is not built from scalars, lists and maps.
            ContainsDottedKeysError: If any key contains a dot.
        """
        data = {} if data is None else data
        if trusted:
            check_root(data)
        else:
            check_tree(data)
        self._data: dict[str, Any] = validate(copy.deepcopy(data), trusted=trusted)
        self.validated: builtins.bool = True

    @classmethod
    def _over(cls, tree: dict[str, Any]) -> NullableConfig:
        """Wrap a tree that an existing view already validated, without copying it."""
        view = cls.__new__(cls)
        view._data = tree
        view.validated = True
        return view

    def raw(self, key: str) -> Any:
        """Return the value at key unmodified, whatever its kind."""
        return copy.deepcopy(resolve(self._data, key))

    def string(self, key: str) -> str | None:
        val = self.raw(key)
        return None if val is None else _as_string(key, val)

    def bool(self, key: str) -> builtins.bool | None:
        val = self.raw(key)
        return None if val is None else _as_bool(key, val)

    def int(self, key: str) -> builtins.int | None:
        val = self.raw(key)
        return None if val is None else _as_int(key, val)

    def float(self, key: str) -> builtins.float | None:
        val = self.raw(key)
        return None if val is None else _as_float(key, val)

    def list(self, key: str) -> builtins.list[Any] | None:
        val = self.raw(key)
        return None if val is None else _as_list(key, val)

    def map(self, key: str) -> dict[str, Any] | None:
        val = self.raw(key)
        return None if val is None else _as_map(key, val)

    def sub_view(self, key: str) -> Config | None:
        """Return a strict Config scoped to the map at key, or None if it is null."""
        val = self.map(key)
        if val is None:
            return None
        _logger.debug("Creating sub-view for '%s'", key)
        return Config._over(validate(val, trusted=True))

    def to_tree(self) -> dict[str, Any]:
        """Return a copy of the whole configuration tree."""
        return copy.deepcopy(self._data)

    def to_flat(self, delimiter: str = DELIMITER) -> dict[str, Any]:
        """Return the tree flattened to {path: leaf}, with paths joined by delimiter."""
        return flatten(self._data, delimiter)


class Config(NullableConfig):
    """Strict typed accessors over a configuration tree.

    The tree is copied and checked once, at construction. Dotted keys are
    refused up front because ``{"a.b": 1}`` and ``{"a": {"b": 1}}`` would
    otherwise answer the same path.

    Attributes:
        nullable: A NullableConfig over the identical tree.
        validated: Always True; a view only exists once its tree passed validation.
    """

    def __init__(self, data: dict[str, Any] | None = None, *, trusted: builtins.bool = False) -> None:
        super().__init__(data, trusted=trusted)
        self.nullable: NullableConfig = NullableConfig._over(self._data)

    @classmethod
    def _over(cls, tree: dict[str, Any]) -> Config:
        """Wrap an already validated tree that no other view holds."""
        view = cls.__new__(cls)
        view._data = tree
        view.validated = True
        view.nullable = NullableConfig._over(tree)
        return view

    def string(self, key: str) -> str:
        return _as_string(key, self.raw(key))

    def bool(self, key: str) -> builtins.bool:
        return _as_bool(key, self.raw(key))

    def int(self, key: str) -> builtins.int:
        return _as_int(key, self.raw(key))

    def float(self, key: str) -> builtins.float:
        return _as_float(key, self.raw(key))

    def list(self, key: str) -> builtins.list[Any]:
        """Return the list at key. An empty map counts as an empty list."""
        return _as_list(key, self.raw(key))

    def map(self, key: str) -> dict[str, Any]:
        """Return the str-keyed map at key. An empty list counts as an empty map."""
        return _as_map(key, self.raw(key))

    def sub_view(self, key: str) -> Config:
        """Return a Config scoped to the map at key.

        The sub-tree comes from an already validated tree, so it is not
        validated again. The new view owns the copy map() made.
        """
        _logger.debug("Creating sub-view for '%s'", key)
        return Config._over(validate(self.map(key), trusted=True))
