"""Error hierarchy for the typedconf package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "TypedConfigError",
    "InvalidPathError",
    "KeyNotFoundError",
    "ContainsDottedKeysError",
    "TypeMismatchError",
    "InvalidTreeError",
    "ErrorCodes",
]


class TypedConfigError(Exception):
    """Base error for all typedconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPathError(TypedConfigError):
    """Raised when a lookup path is malformed (empty, or with an empty segment)."""

    def __init__(self, path: str, message: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=message,
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The rejected path, after trimming."""
        return self.details["path"]


class KeyNotFoundError(TypedConfigError):
    """Raised when a path does not resolve in the configuration tree."""

    def __init__(
        self,
        path: str,
        sub_path: str,
        found_value: str | None = None,
        **kwargs: Any,
    ) -> None:
        if found_value is None:
            message = f"Couldn't find key '{path}' in the config. No value found at: '{sub_path}'"
        else:
            message = f"Couldn't find key '{path}'. Encountered value '{found_value}' at: '{sub_path}'"
        super().__init__(
            code="KEY_NOT_FOUND",
            message=message,
            details={"path": path, "sub_path": sub_path, "found_value": found_value},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The full path that was requested."""
        return self.details["path"]

    @property
    def sub_path(self) -> str:
        """The deepest sub-path reached before resolution stopped."""
        return self.details["sub_path"]

    @property
    def found_value(self) -> str | None:
        """Rendering of the scalar that blocked descent, or None if nothing was there."""
        return self.details["found_value"]


class ContainsDottedKeysError(TypedConfigError):
    """Raised when configuration data contains keys with a literal dot."""

    def __init__(self, errors: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="CONTAINS_DOTTED_KEYS",
            message="Configuration contains dotted keys:\n\n" + "\n".join(errors),
            details={"errors": list(errors)},
            **kwargs,
        )

    @property
    def errors(self) -> list[str]:
        """Every offending key, as ' => '-joined ownership paths."""
        return self.details["errors"]


class TypeMismatchError(TypedConfigError):
    """Raised by a typed accessor when the value found has the wrong kind."""

    def __init__(self, path: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"Expected {expected} at '{path}', but found {actual}",
            details={"path": path, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path whose value failed the type check."""
        return self.details["path"]

    @property
    def expected(self) -> str:
        """Name of the kind the accessor asked for."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """Name of the kind actually stored at the path."""
        return self.details["actual"]


class InvalidTreeError(TypedConfigError):
    """Raised when configuration data is not built from scalars, lists and maps."""

    def __init__(
        self,
        message: str = "Configuration tree contains unsupported values",
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="INVALID_TREE",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """One entry per offending location, with 'path' and 'message' keys."""
        return self.details["errors"]


class ErrorCodes:
    """All typedconf error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    INVALID_PATH = "INVALID_PATH"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    CONTAINS_DOTTED_KEYS = "CONTAINS_DOTTED_KEYS"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    INVALID_TREE = "INVALID_TREE"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
