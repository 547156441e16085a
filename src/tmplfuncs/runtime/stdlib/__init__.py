"""
tmplfuncs Standard Library.

Provides the string, collection, random and encoding template functions.
"""

from tmplfuncs.runtime.stdlib.string import *
from tmplfuncs.runtime.stdlib.collections import *
from tmplfuncs.runtime.stdlib.random import *
from tmplfuncs.runtime.stdlib.encoding import *

__all__ = [
    # String
    "substr", "trunc", "quote", "squote", "cat",
    "contains", "has_prefix", "has_suffix",
    "trim", "trim_all", "trim_prefix", "trim_suffix", "replace", "nospace",
    "upper", "lower", "title", "swapcase", "untitle", "initials",
    "snakecase", "kebabcase", "camelcase",
    "repeat", "indent", "nindent", "abbrev", "abbrevboth",
    "wrap", "wrap_with", "plural",
    # Collections
    "SplitResult", "split", "splitn", "split_list", "join", "sort_alpha",
    # Random
    "CharacterClass", "random_string",
    "rand_alpha_num", "rand_alpha", "rand_ascii", "rand_numeric", "shuffle",
    # Encoding
    "b64enc", "b64dec", "b32enc", "b32dec",
]
