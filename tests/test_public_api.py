"""Tests for the typedconf public API surface.

Verifies that all expected names are importable from the top-level
``typedconf`` package and that ``__all__`` is comprehensive.
"""

import typedconf


class TestPublicAPIImports:
    """Every public component must be importable from ``import typedconf``."""

    # -- Views --

    def test_config_importable(self):
        from typedconf import Config

        assert Config is not None

    def test_nullable_config_importable(self):
        from typedconf import NullableConfig

        assert NullableConfig is not None

    # -- Paths and validation --

    def test_resolve_importable(self):
        from typedconf import resolve, split_path

        assert resolve is not None
        assert split_path is not None

    def test_delimiter_value(self):
        from typedconf import DELIMITER

        assert DELIMITER == "."

    def test_validation_importable(self):
        from typedconf import find_dotted_keys, validate

        assert find_dotted_keys is not None
        assert validate is not None

    # -- Flattening --

    def test_flatten_importable(self):
        from typedconf import flatten, unflatten

        assert flatten is not None
        assert unflatten is not None

    # -- Errors --

    def test_errors_importable(self):
        from typedconf import (
            ContainsDottedKeysError,
            ErrorCodes,
            InvalidPathError,
            InvalidTreeError,
            KeyNotFoundError,
            TypedConfigError,
            TypeMismatchError,
        )

        for cls in (
            ContainsDottedKeysError,
            InvalidPathError,
            InvalidTreeError,
            KeyNotFoundError,
            TypeMismatchError,
        ):
            assert issubclass(cls, TypedConfigError)
        assert ErrorCodes is not None


class TestAllExports:
    def test_all_names_resolve(self):
        for name in typedconf.__all__:
            assert hasattr(typedconf, name), f"{name} listed in __all__ but missing"

    def test_no_duplicates(self):
        assert len(typedconf.__all__) == len(set(typedconf.__all__))

    def test_version(self):
        assert typedconf.__version__ == "0.1.0"
