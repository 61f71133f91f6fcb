"""typedconf - Typed dot-path access to nested configuration data."""

from __future__ import annotations

# Views
from typedconf.config import Config, NullableConfig

# Tree
from typedconf.tree import ConfigValue

# Paths and validation
from typedconf.path import DELIMITER, resolve, split_path
from typedconf.validation import find_dotted_keys, validate

# Flattening
from typedconf.flatten import flatten, unflatten

# Errors
from typedconf.errors import (
    ContainsDottedKeysError,
    ErrorCodes,
    InvalidPathError,
    InvalidTreeError,
    KeyNotFoundError,
    TypedConfigError,
    TypeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Views
    "Config",
    "NullableConfig",
    # Tree
    "ConfigValue",
    # Paths and validation
    "DELIMITER",
    "resolve",
    "split_path",
    "find_dotted_keys",
    "validate",
    # Flattening
    "flatten",
    "unflatten",
    # Errors
    "TypedConfigError",
    "InvalidPathError",
    "KeyNotFoundError",
    "ContainsDottedKeysError",
    "TypeMismatchError",
    "InvalidTreeError",
    "ErrorCodes",
]
