"""
tmplfuncs Runtime Package.

Value coercion and the standard function library.
"""

from tmplfuncs.runtime.coerce import (
    ValueKind,
    is_sequence,
    kind_of,
    to_string,
    to_strings,
)

__all__ = [
    "ValueKind",
    "kind_of",
    "is_sequence",
    "to_string",
    "to_strings",
]
