"""
tmplfuncs Utilities Package.

Error types and name-suggestion helpers.
"""

from tmplfuncs.utils.errors import (
    DecodeError,
    TmplFuncsError,
    UnknownFunctionError,
)
from tmplfuncs.utils.suggest import closest_names, edit_distance

__all__ = [
    # Errors
    "TmplFuncsError",
    "DecodeError",
    "UnknownFunctionError",
    # Name suggestions
    "edit_distance",
    "closest_names",
]
