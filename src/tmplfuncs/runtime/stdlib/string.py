"""
tmplfuncs Standard Library - String Module.

Provides string manipulation functions. The text being transformed is
always the last argument so hosts can pipe it in.
"""

from __future__ import annotations

import json
import re
from typing import Any

from tmplfuncs.runtime.coerce import to_string


def _clamp(n: int, low: int, high: int) -> int:
    return max(low, min(n, high))


# =============================================================================
# Substrings
# =============================================================================


def substr(start: int, length: int, text: Any) -> str:
    """
    Return ``length`` characters of text starting at ``start``.

    A negative start counts as 0, a start past the end gives ``""`` and a
    length running past the end stops at the end.

    Examples:
        >>> substr(0, 3, "fooo")
        'foo'
        >>> substr(0, 10, "foo")
        'foo'
    """
    s = to_string(text)
    begin = _clamp(int(start), 0, len(s))
    end = _clamp(begin + int(length), begin, len(s))
    return s[begin:end]


def trunc(count: int, text: Any) -> str:
    """
    Keep the first ``count`` characters, or the last ``-count`` if negative.

    Examples:
        >>> trunc(3, "foooooo")
        'foo'
        >>> trunc(-3, "baaaaaar")
        'aar'
    """
    s = to_string(text)
    count = int(count)
    if count < 0:
        return s[count:] if len(s) + count > 0 else s
    return s[:count]


# =============================================================================
# Quoting
# =============================================================================


def _double_quote(s: str) -> str:
    # Escapes quotes, backslashes and control characters; keeps other unicode
    return json.dumps(s, ensure_ascii=False)


def quote(*values: Any) -> str:
    """Double-quote each non-None argument and join them with spaces."""
    return " ".join(_double_quote(to_string(v)) for v in values if v is not None)


def squote(*values: Any) -> str:
    """Single-quote each non-None argument and join them with spaces."""
    return " ".join(f"'{to_string(v)}'" for v in values if v is not None)


def cat(*values: Any) -> str:
    """Join the non-None arguments with spaces."""
    return " ".join(to_string(v) for v in values if v is not None)


# =============================================================================
# Predicates
# =============================================================================


def contains(substring: Any, text: Any) -> bool:
    """Check if text contains substring."""
    return to_string(substring) in to_string(text)


def has_prefix(prefix: Any, text: Any) -> bool:
    """Check if text starts with prefix."""
    return to_string(text).startswith(to_string(prefix))


def has_suffix(suffix: Any, text: Any) -> bool:
    """Check if text ends with suffix."""
    return to_string(text).endswith(to_string(suffix))


# =============================================================================
# Trimming and replacing
# =============================================================================


def trim(text: Any) -> str:
    """Remove leading and trailing whitespace."""
    return to_string(text).strip()


def trim_all(cutset: Any, text: Any) -> str:
    """Remove every character of cutset from both ends of text."""
    return to_string(text).strip(to_string(cutset))


def trim_prefix(prefix: Any, text: Any) -> str:
    """Remove a leading prefix, if present."""
    return to_string(text).removeprefix(to_string(prefix))


def trim_suffix(suffix: Any, text: Any) -> str:
    """Remove a trailing suffix, if present."""
    return to_string(text).removesuffix(to_string(suffix))


def replace(old: Any, new: Any, text: Any) -> str:
    """Replace every occurrence of old with new."""
    return to_string(text).replace(to_string(old), to_string(new))


def nospace(text: Any) -> str:
    """Remove all whitespace characters."""
    return "".join(ch for ch in to_string(text) if not ch.isspace())


# =============================================================================
# Case
# =============================================================================


def upper(text: Any) -> str:
    """Convert to uppercase."""
    return to_string(text).upper()


def lower(text: Any) -> str:
    """Convert to lowercase."""
    return to_string(text).lower()


def title(text: Any) -> str:
    """Convert to title case."""
    return to_string(text).title()


def swapcase(text: Any) -> str:
    """Swap upper and lower case."""
    return to_string(text).swapcase()


def untitle(text: Any) -> str:
    """
    Lowercase the first letter of each word.

    Examples:
        >>> untitle("First Try")
        'first try'
    """
    out = []
    at_word_start = True
    for ch in to_string(text):
        if ch.isspace():
            at_word_start = True
            out.append(ch)
        elif at_word_start:
            at_word_start = False
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def initials(text: Any) -> str:
    """
    Uppercased first letter of each whitespace-separated word.

    Examples:
        >>> initials("First Try")
        'FT'
    """
    return "".join(word[0] for word in to_string(text).split()).upper()


_WORD_BOUNDARY = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


def _words(s: str) -> list[str]:
    # "FirstName" -> [First, Name], "HTTPServer" -> [HTTP, Server]
    words = []
    for chunk in re.split(r"[\s_\-.]+", s):
        words.extend(_WORD_BOUNDARY.findall(chunk) or ([chunk] if chunk else []))
    return words


def snakecase(text: Any) -> str:
    """Convert to snake_case."""
    return "_".join(w.lower() for w in _words(to_string(text)))


def kebabcase(text: Any) -> str:
    """Convert to kebab-case."""
    return "-".join(w.lower() for w in _words(to_string(text)))


def camelcase(text: Any) -> str:
    """Convert to CamelCase (``http_server`` -> ``HttpServer``)."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(to_string(text)))


# =============================================================================
# Layout
# =============================================================================


def repeat(count: int, text: Any) -> str:
    """Repeat text count times."""
    return to_string(text) * max(int(count), 0)


def indent(spaces: int, text: Any) -> str:
    """
    Prefix every line of text with ``spaces`` spaces.

    Examples:
        >>> indent(4, "a\\nb")
        '    a\\n    b'
    """
    pad = " " * max(int(spaces), 0)
    return pad + to_string(text).replace("\n", "\n" + pad)


def nindent(spaces: int, text: Any) -> str:
    """Like indent, with a newline prepended."""
    return "\n" + indent(spaces, text)


_ELLIPSIS = "..."


def _abbreviate(s: str, offset: int, max_width: int) -> str:
    if len(s) <= max_width:
        return s
    offset = min(offset, len(s))
    if len(s) - offset < max_width - 3:
        offset = len(s) - (max_width - 3)
    if offset <= 4:
        return s[: max_width - 3] + _ELLIPSIS
    if offset + max_width - 3 < len(s):
        return _ELLIPSIS + _abbreviate(s[offset:], 0, max_width - 3)
    return _ELLIPSIS + s[len(s) - (max_width - 3):]


def abbrev(max_width: int, text: Any) -> str:
    """
    Truncate text to ``max_width`` characters ending in ``"..."``.

    Widths below 4 leave the text untouched.

    Examples:
        >>> abbrev(5, "hello world")
        'he...'
    """
    s = to_string(text)
    max_width = int(max_width)
    if max_width < 4:
        return s
    return _abbreviate(s, 0, max_width)


def abbrevboth(left: int, right: int, text: Any) -> str:
    """
    Abbreviate both ends of text.

    ``left`` is the offset where the kept window starts and ``right`` the
    total width of the result.

    Examples:
        >>> abbrevboth(5, 10, "1234 5678 9123")
        '...5678...'
    """
    s = to_string(text)
    left, right = int(left), int(right)
    if right < 4 or (left > 0 and right < 7):
        return s
    return _abbreviate(s, left, right)


def _wrap(width: int, s: str, newline: str, break_long_words: bool) -> str:
    # Breaks only at literal spaces; other whitespace, newlines included, is kept
    width = max(int(width), 1)
    newline = newline or "\n"
    out = []
    offset = 0
    while len(s) - offset > width:
        if s[offset] == " ":
            offset += 1
            continue
        space = s.rfind(" ", offset, offset + width + 1)
        if space >= offset:
            out.append(s[offset:space] + newline)
            offset = space + 1
        elif break_long_words:
            out.append(s[offset:offset + width] + newline)
            offset += width
        else:
            space = s.find(" ", offset + width)
            if space == -1:
                break
            out.append(s[offset:space] + newline)
            offset = space + 1
    out.append(s[offset:])
    return "".join(out)


def wrap(width: int, text: Any) -> str:
    """
    Wrap text at word boundaries near ``width`` columns.

    Long words are kept whole.

    Examples:
        >>> wrap(5, "Hello World")
        'Hello\\nWorld'
    """
    return _wrap(width, to_string(text), "\n", False)


def wrap_with(width: int, token: Any, text: Any) -> str:
    """Wrap like ``wrap`` but join lines with ``token`` and split long words."""
    return _wrap(width, to_string(text), to_string(token), True)


def plural(one: Any, many: Any, count: int) -> str:
    """Return ``one`` when count is 1, ``many`` otherwise."""
    return to_string(one) if int(count) == 1 else to_string(many)


__all__ = [
    "substr",
    "trunc",
    "quote",
    "squote",
    "cat",
    "contains",
    "has_prefix",
    "has_suffix",
    "trim",
    "trim_all",
    "trim_prefix",
    "trim_suffix",
    "replace",
    "nospace",
    "upper",
    "lower",
    "title",
    "swapcase",
    "untitle",
    "initials",
    "snakecase",
    "kebabcase",
    "camelcase",
    "repeat",
    "indent",
    "nindent",
    "abbrev",
    "abbrevboth",
    "wrap",
    "wrap_with",
    "plural",
]
