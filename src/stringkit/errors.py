"""Errors raised by STRINGKIT."""

from collections.abc import Iterable


class StringKitError(Exception):
    """Base class for all STRINGKIT errors."""


class UnknownCaseStyleError(StringKitError, LookupError):
    """Raised when a case conversion is requested for an unknown style name."""

    def __init__(self, style: str, known: Iterable[str]) -> None:
        self.style = style
        self.known = tuple(known)
        super().__init__(
            f"Unknown case style {style!r} (expected one of: {', '.join(self.known)})"
        )
