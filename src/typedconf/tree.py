"""Configuration tree node kinds and the construction-time shape check."""

from __future__ import annotations

from typing import Any

from pydantic import JsonValue, TypeAdapter, ValidationError as PydanticValidationError

from typedconf.errors import InvalidTreeError

__all__ = ["ConfigValue", "check_root", "check_tree", "is_container", "kind_name", "render_scalar"]

# A tree node: str, bool, int, float, None, list of nodes or str-keyed dict of nodes.
ConfigValue = JsonValue

_TREE_ADAPTER: TypeAdapter[Any] = TypeAdapter(JsonValue)


def check_root(data: Any) -> None:
    """Raise InvalidTreeError unless data is a dict."""
    if not isinstance(data, dict):
        raise InvalidTreeError(
            f"Configuration root must be a mapping, got {type(data).__name__}"
        )


def _tree_path(loc: tuple[Any, ...]) -> str:
    # JsonValue is a tagged union: every key or index in loc follows its
    # container's tag ("dict"/"list"), and key errors end with "[key]".
    return "/" + "/".join(str(segment) for segment in loc[1::2])


def check_tree(data: Any) -> None:
    """Check that data is a map built only from scalars, lists and str-keyed maps.

    pydantic-core stops recursing at about 250 levels of nesting, so deeper
    trees cannot be checked here; build those views with ``trusted=True``.

    Raises:
        InvalidTreeError: If the root is not a dict, any node has another kind,
            or the tree is nested too deeply to check.
    """
    check_root(data)
    try:
        _TREE_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        errors = [
            {"path": _tree_path(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
            for err in e.errors()
        ]
        if any(err.get("type") == "recursion_loop" for err in e.errors()):
            raise InvalidTreeError(
                "Configuration tree is nested too deeply to check its shape",
                errors=errors,
                cause=e,
            ) from e
        raise InvalidTreeError(errors=errors, cause=e) from e


def is_container(value: Any) -> bool:
    """Return True for list and map nodes."""
    return isinstance(value, (dict, list))


def kind_name(value: Any) -> str:
    """Human-readable node kind, used in type mismatch messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "map"
    return type(value).__name__


def render_scalar(value: Any) -> str:
    """Render a scalar the way it would be written in a configuration file."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # whole floats render without a fraction, so 1.0 reads as "1"
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)
