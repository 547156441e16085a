"""
tmplfuncs Function Registry.

Maps the names templates use (``trimAll``, ``sortAlpha``, ...) to the
Python implementations. Hosts merge ``func_map()`` into their own function
namespace.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from tmplfuncs.runtime.coerce import to_string, to_strings
from tmplfuncs.runtime.stdlib import collections as _collections
from tmplfuncs.runtime.stdlib import encoding as _encoding
from tmplfuncs.runtime.stdlib import random as _rand
from tmplfuncs.runtime.stdlib import string as _string
from tmplfuncs.utils.errors import UnknownFunctionError
from tmplfuncs.utils.suggest import closest_names

logger = logging.getLogger(__name__)

_FUNCTIONS: dict[str, Callable[..., Any]] = {
    # Coercion
    "toString": to_string,
    "toStrings": to_strings,
    # Substrings
    "substr": _string.substr,
    "trunc": _string.trunc,
    # Quoting
    "quote": _string.quote,
    "squote": _string.squote,
    "cat": _string.cat,
    # Predicates
    "contains": _string.contains,
    "hasPrefix": _string.has_prefix,
    "hasSuffix": _string.has_suffix,
    # Trimming and replacing
    "trim": _string.trim,
    "trimAll": _string.trim_all,
    "trimall": _string.trim_all,
    "trimPrefix": _string.trim_prefix,
    "trimSuffix": _string.trim_suffix,
    "replace": _string.replace,
    "nospace": _string.nospace,
    # Case
    "upper": _string.upper,
    "lower": _string.lower,
    "title": _string.title,
    "swapcase": _string.swapcase,
    "untitle": _string.untitle,
    "initials": _string.initials,
    "snakecase": _string.snakecase,
    "kebabcase": _string.kebabcase,
    "camelcase": _string.camelcase,
    # Layout
    "repeat": _string.repeat,
    "indent": _string.indent,
    "nindent": _string.nindent,
    "abbrev": _string.abbrev,
    "abbrevboth": _string.abbrevboth,
    "wrap": _string.wrap,
    "wrapWith": _string.wrap_with,
    "plural": _string.plural,
    # Split / join
    "split": _collections.split,
    "splitn": _collections.splitn,
    "splitList": _collections.split_list,
    "join": _collections.join,
    "sortAlpha": _collections.sort_alpha,
    # Random
    "randAlphaNum": _rand.rand_alpha_num,
    "randAlpha": _rand.rand_alpha,
    "randAscii": _rand.rand_ascii,
    "randNumeric": _rand.rand_numeric,
    "shuffle": _rand.shuffle,
    # Encoding
    "b64enc": _encoding.b64enc,
    "b64dec": _encoding.b64dec,
    "b32enc": _encoding.b32enc,
    "b32dec": _encoding.b32dec,
}

FUNCTIONS: Mapping[str, Callable[..., Any]] = MappingProxyType(_FUNCTIONS)


def func_map() -> dict[str, Callable[..., Any]]:
    """Return a fresh, mutable copy of the registry."""
    return dict(_FUNCTIONS)


def get_function(name: str) -> Callable[..., Any]:
    """
    Look up a function by its template name.

    Raises:
        UnknownFunctionError: If no function has that name; the error lists
            close matches.
    """
    try:
        return _FUNCTIONS[name]
    except KeyError:
        suggestions = closest_names(name, _FUNCTIONS)
        logger.debug("unknown function %r, suggestions: %s", name, suggestions)
        raise UnknownFunctionError(name, suggestions) from None


def call(name: str, *args: Any) -> Any:
    """Call a registered function with already-evaluated arguments."""
    return get_function(name)(*args)
