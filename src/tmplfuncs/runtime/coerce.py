"""
tmplfuncs Runtime - Value Coercion.

Every template function accepts dynamically typed arguments. This module
classifies a value into a closed set of kinds and renders each kind as
canonical text, so the rest of the function set only ever deals with ``str``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence, Set
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Kinds of value a template function may receive."""

    ABSENT = "absent"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    BYTES = "bytes"
    ERROR = "error"
    STRINGLIKE = "stringlike"
    SEQUENCE = "sequence"
    OTHER = "other"


_BYTES_TYPES = (bytes, bytearray, memoryview)


def _overrides_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value.

    Order matters: ``bool`` is an ``int`` subclass, and ``str``/``bytes``
    are sequences, so both are tested before the generic cases.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, _BYTES_TYPES):
        return ValueKind.BYTES
    if isinstance(value, BaseException):
        return ValueKind.ERROR
    if isinstance(value, (Sequence, Set)):
        return ValueKind.SEQUENCE
    if _overrides_str(value):
        return ValueKind.STRINGLIKE
    return ValueKind.OTHER


def is_sequence(value: Any) -> bool:
    """Return True for list-like values (never for text or bytes)."""
    return kind_of(value) is ValueKind.SEQUENCE


def _format_float(value: float) -> str:
    # 3.0 -> "3", 1.5 -> "1.5", 1e21 -> "1e+21"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _error_message(error: BaseException) -> str:
    # str(KeyError("k")) is "'k'"; classes with their own __str__ keep it
    plain = type(error).__str__ in (BaseException.__str__, KeyError.__str__)
    if plain and len(error.args) == 1 and isinstance(error.args[0], str):
        return error.args[0]
    return str(error)


def to_string(value: Any) -> str:
    """
    Render any value as text.

    Args:
        value: Any value a template may pass

    Returns:
        ``""`` for None, the decoded text for bytes, the message for
        exceptions, ``"true"``/``"false"`` for booleans, canonical decimal
        text for numbers and ``str(value)`` for everything else.

    Examples:
        >>> to_string(None)
        ''
        >>> to_string(b"bytes")
        'bytes'
        >>> to_string(2.0)
        '2'
    """
    match kind_of(value):
        case ValueKind.ABSENT:
            return ""
        case ValueKind.TEXT:
            return str(value)
        case ValueKind.BOOLEAN:
            return "true" if value else "false"
        case ValueKind.INTEGER:
            return str(int(value))
        case ValueKind.FLOAT:
            return _format_float(value)
        case ValueKind.BYTES:
            return bytes(value).decode("utf-8", errors="replace")
        case ValueKind.ERROR:
            return _error_message(value)
        case _:
            return str(value)


def to_strings(value: Any) -> list[str]:
    """
    Render a sequence as a list of text, dropping None elements.

    A None argument gives an empty list and any other scalar gives a
    one-element list.

    Examples:
        >>> to_strings([1, None, 2])
        ['1', '2']
        >>> to_strings("abc")
        ['abc']
    """
    match kind_of(value):
        case ValueKind.ABSENT:
            return []
        case ValueKind.SEQUENCE:
            return [to_string(item) for item in value if item is not None]
        case _:
            return [to_string(value)]
