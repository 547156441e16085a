"""
Error types for the tmplfuncs function set.
"""

from typing import Optional


class TmplFuncsError(Exception):
    """Base exception for all tmplfuncs errors."""

    def __init__(self, message: str, function: Optional[str] = None) -> None:
        self.message = message
        self.function = function
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.function:
            return f"[{self.function}] {self.message}"
        return self.message


class DecodeError(TmplFuncsError, ValueError):
    """
    Raised when base64 or base32 input cannot be decoded.

    Attributes:
        encoding: Name of the codec ("base64" or "base32")
        data: The offending input text
    """

    def __init__(self, encoding: str, data: str, reason: Optional[str] = None) -> None:
        self.encoding = encoding
        self.data = data
        self.reason = reason
        super().__init__(f"illegal {encoding} data")

    def _format_message(self) -> str:
        parts = [f"{self.message}: {self.data!r}"]
        if self.reason:
            parts.append(f"({self.reason})")
        return " ".join(parts)


class UnknownFunctionError(TmplFuncsError, LookupError):
    """
    Raised when a function name is not in the registry.

    Carries close matches so callers can print a "did you mean" hint.
    """

    def __init__(self, name: str, suggestions: Optional[list[str]] = None) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(f"unknown function '{name}'")

    def _format_message(self) -> str:
        if not self.suggestions:
            return self.message
        hint = ", ".join(f"'{s}'" for s in self.suggestions)
        return f"{self.message}. Did you mean {hint}?"
