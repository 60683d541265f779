"""
String conversion for populated fields.

One converter per supported field kind. The scalar parsers raise
ConversionError subclasses which callers propagate unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .errors import BoolParseError, IntParseError
from .fields import FieldKind

LIST_SEPARATOR = ","

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(raw: str) -> int:
    """
    Parse a base-10 signed integer.

    Accepts an optional sign followed by ASCII digits. Whitespace, underscores
    and other bases are rejected, unlike the int() builtin.

    Raises:
        IntParseError: If the string is not an integer or is outside the
            signed 64-bit range.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise IntParseError("parse_int", raw, "invalid syntax")

    value = int(raw)
    if value < INT_MIN or value > INT_MAX:
        raise IntParseError("parse_int", raw, "value out of range")
    return value


def parse_bool(raw: str) -> bool:
    """
    Parse a boolean literal.

    Accepts 1/0, t/f, T/F and true/false in any letter case.

    Raises:
        BoolParseError: If the string is not a recognized literal.
    """
    if raw in _TRUE_LITERALS or raw.lower() == "true":
        return True
    if raw in _FALSE_LITERALS or raw.lower() == "false":
        return False
    raise BoolParseError("parse_bool", raw, "invalid syntax")


def parse_str(raw: str) -> str:
    return raw


def split_list(raw: str) -> list[str]:
    """Split on the list separator. Elements are neither trimmed nor dropped."""
    return raw.split(LIST_SEPARATOR)


def _list_of(element: Callable[[str], Any]) -> Callable[[str], list[Any]]:
    def convert(raw: str) -> list[Any]:
        return [element(item) for item in split_list(raw)]

    return convert


CONVERTERS: dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.STRING: parse_str,
    FieldKind.INT: parse_int,
    FieldKind.BOOL: parse_bool,
    FieldKind.STRING_LIST: _list_of(parse_str),
    FieldKind.INT_LIST: _list_of(parse_int),
    FieldKind.BOOL_LIST: _list_of(parse_bool),
}


def convert_raw(kind: FieldKind, raw: str) -> Any:
    """
    Convert a raw string according to a supported field kind.

    Raises:
        KeyError: If the kind has no converter (FieldKind.UNSUPPORTED).
        ConversionError: If the string cannot be parsed.
    """
    return CONVERTERS[kind](raw)
