"""
tmplfuncs Standard Library - Collections Module.

Functions that turn text into sequences and sequences back into text:
split, splitn, join and sortAlpha.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from tmplfuncs.runtime.coerce import is_sequence, to_string, to_strings

_FRAGMENT_KEY = re.compile(r"_(\d+)")


def _fragment_index(key: str) -> Optional[int]:
    match = _FRAGMENT_KEY.fullmatch(key)
    return int(match.group(1)) if match else None


class SplitResult(list):
    """
    Fragments produced by ``split``/``splitn``.

    Behaves as a plain list and additionally exposes fragment ``n`` under
    the key ``_n``, both as an attribute and as a string item, for
    template languages without an index operator::

        parts = split("$", "foo$bar")
        parts[0] == parts._0 == parts["_0"] == "foo"
    """

    def __getattr__(self, name: str) -> str:
        index = _fragment_index(name)
        if index is None or index >= len(self):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return list.__getitem__(self, index)

    def __getitem__(self, key):
        if isinstance(key, str):
            index = _fragment_index(key)
            if index is None or index >= len(self):
                raise KeyError(key)
            return list.__getitem__(self, index)
        return list.__getitem__(self, key)

    def to_dict(self) -> dict[str, str]:
        """Return the ``_n`` keyed view as a dict."""
        return {f"_{i}": fragment for i, fragment in enumerate(self)}


def _split(delimiter: str, s: str, max_parts: int) -> list[str]:
    if max_parts == 0:
        return []
    if delimiter == "":
        # Empty delimiter explodes into characters; the last one keeps the rest
        if max_parts < 0 or max_parts >= len(s):
            return list(s)
        return list(s[: max_parts - 1]) + [s[max_parts - 1:]]
    if max_parts < 0:
        return s.split(delimiter)
    return s.split(delimiter, max_parts - 1)


def split(delimiter: Any, text: Any) -> SplitResult:
    """
    Split text on every literal occurrence of delimiter.

    Examples:
        >>> split("$", "foo$bar$baz")._0
        'foo'
    """
    return SplitResult(_split(to_string(delimiter), to_string(text), -1))


def splitn(delimiter: Any, max_parts: int, text: Any) -> SplitResult:
    """
    Split text into at most ``max_parts`` fragments.

    The last fragment holds the unsplit remainder. Zero gives no
    fragments and a negative count means no limit.

    Examples:
        >>> list(splitn("$", 2, "foo$bar$baz"))
        ['foo', 'bar$baz']
    """
    return SplitResult(_split(to_string(delimiter), to_string(text), int(max_parts)))


def split_list(delimiter: Any, text: Any) -> list[str]:
    """Split text into a plain list."""
    return _split(to_string(delimiter), to_string(text), -1)


def join(separator: Any, value: Any) -> str:
    """
    Join the text form of each non-None element with separator.

    A scalar is returned as its text, without a separator.

    Examples:
        >>> join("-", [1, None, 2])
        '1-2'
        >>> join("-", "abc")
        'abc'
    """
    return to_string(separator).join(to_strings(value))


def sort_alpha(value: Any) -> list[str]:
    """
    Sort the text form of each element lexicographically.

    Numbers are compared as text, so ``[10, 9]`` sorts to ``["10", "9"]``.
    """
    if is_sequence(value):
        return sorted(to_strings(value))
    return [to_string(value)]


__all__ = [
    "SplitResult",
    "split",
    "splitn",
    "split_list",
    "join",
    "sort_alpha",
]
