"""
tmplfuncs Standard Library - Random Module.

Provides random string generation backed by the operating system's
entropy source. There is no seeding hook.
"""

from __future__ import annotations

import random as _random
import string as _string
from enum import Enum
from typing import Any

from tmplfuncs.runtime.coerce import to_string

# Global random generator (os.urandom backed, safe across threads)
_rng = _random.SystemRandom()


class CharacterClass(Enum):
    """Named character sets for random strings."""

    ALPHA = _string.ascii_letters
    NUMERIC = _string.digits
    ALPHANUMERIC = _string.ascii_letters + _string.digits
    ASCII = "".join(chr(c) for c in range(32, 127))

    @property
    def chars(self) -> str:
        return self.value


def random_string(length: int, *classes: CharacterClass) -> str:
    """
    Return ``length`` characters drawn uniformly from the given classes.

    Args:
        length: Number of characters; negative counts give ``""``
        classes: One or more character classes (default ALPHANUMERIC)

    Returns:
        The generated string
    """
    if not classes:
        classes = (CharacterClass.ALPHANUMERIC,)
    alphabet = "".join(dict.fromkeys("".join(c.chars for c in classes)))
    return "".join(_rng.choice(alphabet) for _ in range(max(int(length), 0)))


def rand_alpha_num(length: int) -> str:
    """Return a random string of letters and digits."""
    return random_string(length, CharacterClass.ALPHANUMERIC)


def rand_alpha(length: int) -> str:
    """Return a random string of letters."""
    return random_string(length, CharacterClass.ALPHA)


def rand_ascii(length: int) -> str:
    """Return a random string of printable ASCII characters."""
    return random_string(length, CharacterClass.ASCII)


def rand_numeric(length: int) -> str:
    """Return a random string of digits."""
    return random_string(length, CharacterClass.NUMERIC)


def shuffle(text: Any) -> str:
    """Return the characters of text in random order."""
    chars = list(to_string(text))
    _rng.shuffle(chars)
    return "".join(chars)


__all__ = [
    "CharacterClass",
    "random_string",
    "rand_alpha_num",
    "rand_alpha",
    "rand_ascii",
    "rand_numeric",
    "shuffle",
]
