"""Custom exception hierarchy for the Unicode lookup engine."""

from __future__ import annotations


class UnicodeToolError(RuntimeError):
    """Base exception for lookup failures."""


class UsageError(UnicodeToolError):
    """Raised when the positional arguments cannot form a valid request."""


class ParseError(UnicodeToolError):
    """Raised when a positional argument cannot be parsed."""


class HexParseError(ParseError):
    """Raised when an argument is not a valid hexadecimal code point."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid hex value {value!r}: {reason}")
        self.value = value
        self.reason = reason


class PatternError(ParseError):
    """Raised when a search argument is not a valid regular expression."""


class MalformedDatabaseError(UnicodeToolError):
    """Raised when the character database text is corrupted."""

    def __init__(self, line_number: int) -> None:
        super().__init__(f"malformed database: line {line_number}")
        self.line_number = line_number

    @classmethod
    def from_decode_error(cls, exc: UnicodeDecodeError) -> MalformedDatabaseError:
        """Report the line holding the bytes that are not valid UTF-8."""
        return cls(exc.object.count(b"\n", 0, exc.start) + 1)


class DatabaseFetchError(UnicodeToolError):
    """Raised when the character database cannot be downloaded."""


__all__ = [
    "DatabaseFetchError",
    "HexParseError",
    "MalformedDatabaseError",
    "ParseError",
    "PatternError",
    "UnicodeToolError",
    "UsageError",
]
