"""
tmplfuncs - String functions for template expression pipelines.

A registry of pure string-manipulation functions (substr, quote, split,
join, indent, wrap, secure random strings, base64/base32 ...) that a
templating runtime calls by name with already-evaluated arguments.
"""

from tmplfuncs.registry import FUNCTIONS, call, func_map, get_function
from tmplfuncs.runtime.coerce import to_string, to_strings
from tmplfuncs.utils.errors import DecodeError, TmplFuncsError, UnknownFunctionError

__version__ = "0.1.0"
__all__ = [
    "FUNCTIONS",
    "func_map",
    "get_function",
    "call",
    "to_string",
    "to_strings",
    "TmplFuncsError",
    "DecodeError",
    "UnknownFunctionError",
]
