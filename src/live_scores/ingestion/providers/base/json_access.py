"""
Typed field access over decoded provider JSON.

Every accessor raises ParseError naming the field and the expected type.
Passing `default=` turns any failure (missing field, wrong type, bad
numeric string) into that default instead.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from .errors import IntegerParseError, ParseError

Json = Mapping[str, Any]
T = TypeVar("T")

_MISSING: Any = object()
_PREVIEW_LEN = 120


def _preview(value: Any) -> str:
    text = repr(value)
    if len(text) > _PREVIEW_LEN:
        return text[:_PREVIEW_LEN] + "..."
    return text


def _lookup(obj: Any, name: str) -> Any:
    if not isinstance(obj, Mapping):
        raise ParseError(
            f"Cannot read {name!r} from a non-object",
            context={"field": name, "value": _preview(obj)},
        )
    if name not in obj:
        raise ParseError(
            f"{name} not present",
            context={"field": name, "keys": sorted(str(k) for k in obj)[:20]},
        )
    return obj[name]


def _typed(
    obj: Any,
    name: str,
    *,
    expected: str,
    check: Callable[[Any], bool],
    default: Any,
) -> Any:
    try:
        value = _lookup(obj, name)
    except ParseError:
        if default is not _MISSING:
            return default
        raise

    if not check(value):
        if default is not _MISSING:
            return default
        raise ParseError(
            f"{name} is not {expected}",
            context={"field": name, "value": _preview(value)},
        )
    return value


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _parse_uint(name: str, text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise IntegerParseError(
            f"{name} is not an integer string",
            context={"field": name, "value": _preview(text)},
        )
    return int(text)


def get_object(obj: Any, name: str, *, default: Any = _MISSING) -> Json:
    return _typed(
        obj, name, expected="an object", check=lambda v: isinstance(v, Mapping), default=default
    )


def get_array(obj: Any, name: str, *, default: Any = _MISSING) -> Sequence[Any]:
    return _typed(
        obj, name, expected="an array", check=lambda v: isinstance(v, list), default=default
    )


def get_str(obj: Any, name: str, *, default: Any = _MISSING) -> str:
    return _typed(obj, name, expected="a string", check=lambda v: isinstance(v, str), default=default)


def get_bool(obj: Any, name: str, *, default: Any = _MISSING) -> bool:
    return _typed(obj, name, expected="a bool", check=lambda v: isinstance(v, bool), default=default)


def get_int(obj: Any, name: str, *, default: Any = _MISSING) -> int:
    """Native non-negative JSON integer."""

    return _typed(obj, name, expected="an unsigned integer", check=_is_uint, default=default)


def get_int_str(obj: Any, name: str, *, default: Any = _MISSING) -> int:
    """Non-negative integer encoded as a string (ESPN ids, scores)."""

    try:
        return _parse_uint(name, get_str(obj, name))
    except ParseError:
        if default is not _MISSING:
            return default
        raise


def get_numeric(obj: Any, name: str, *, default: Any = _MISSING) -> int:
    """Non-negative integer given either natively or as a numeric string."""

    try:
        value = _typed(
            obj,
            name,
            expected="an integer or numeric string",
            check=lambda v: _is_uint(v) or isinstance(v, str),
            default=_MISSING,
        )
        return value if _is_uint(value) else _parse_uint(name, value)
    except ParseError:
        if default is not _MISSING:
            return default
        raise


def first_item(items: Sequence[T], what: str) -> T:
    if not items:
        raise ParseError(f"Missing {what}", context={"field": what})
    return items[0]
