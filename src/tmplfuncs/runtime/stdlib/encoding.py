"""
tmplfuncs Standard Library - Encoding Module.

Base64 and base32 encoders and decoders using the standard padded
alphabets. Decoding is the only operation in the function set that fails.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Callable

from tmplfuncs.runtime.coerce import to_string
from tmplfuncs.utils.errors import DecodeError

logger = logging.getLogger(__name__)


def _decode(encoding: str, decoder: Callable[[str], bytes], text: Any) -> str:
    data = to_string(text)
    try:
        raw = decoder(data)
    except (binascii.Error, ValueError) as e:
        logger.debug("%s decode failed for %r: %s", encoding, data, e)
        raise DecodeError(encoding, data, str(e)) from e
    return raw.decode("utf-8", errors="replace")


def b64enc(value: Any) -> str:
    """Base64-encode the UTF-8 bytes of value."""
    return base64.b64encode(to_string(value).encode("utf-8")).decode("ascii")


def b64dec(text: Any) -> str:
    """
    Decode base64 text.

    Raises:
        DecodeError: If text is not valid padded base64
    """
    return _decode("base64", lambda s: base64.b64decode(s, validate=True), text)


def b32enc(value: Any) -> str:
    """Base32-encode the UTF-8 bytes of value."""
    return base64.b32encode(to_string(value).encode("utf-8")).decode("ascii")


def b32dec(text: Any) -> str:
    """
    Decode base32 text.

    Raises:
        DecodeError: If text is not valid padded base32
    """
    return _decode("base32", base64.b32decode, text)


__all__ = [
    "b64enc",
    "b64dec",
    "b32enc",
    "b32dec",
]
