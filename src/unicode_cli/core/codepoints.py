"""Conversions between hexadecimal text, code points, and printable glyphs."""

from __future__ import annotations

import re

from .exceptions import HexParseError


# Signed 22-bit limit: covers the whole code point space with headroom.
HEX_BITS = 22
MAX_HEX_VALUE = (1 << (HEX_BITS - 1)) - 1
MAX_CODE_POINT = 0x10FFFF
REPLACEMENT_CHARACTER = "\ufffd"

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def parse_hex(value: str) -> int:
    """Parse ``value`` as a hexadecimal code point."""
    if not _HEX_PATTERN.fullmatch(value):
        raise HexParseError(value, "invalid syntax")
    code = int(value, 16)
    if code > MAX_HEX_VALUE:
        raise HexParseError(value, "value out of range")
    return code


def format_hex(code: int) -> str:
    """Return the lowercase hex form, zero-padded to at least four digits."""
    return f"{code:04x}"


def to_char(code: int) -> str:
    """Return the character for ``code``, or U+FFFD when it cannot be encoded."""
    if code < 0 or code > MAX_CODE_POINT or 0xD800 <= code <= 0xDFFF:
        return REPLACEMENT_CHARACTER
    return chr(code)


def is_printable(code: int) -> bool:
    """Return whether ``code`` is a graphic character or the ASCII space."""
    if code < 0 or code > MAX_CODE_POINT:
        return False
    return chr(code).isprintable()


def format_header(code: int) -> str:
    """Return ``U+XXXX`` followed by the quoted glyph when it is printable."""
    header = f"U+{code:04X}"
    if is_printable(code):
        header += f" '{chr(code)}'"
    return header


__all__ = [
    "HEX_BITS",
    "MAX_CODE_POINT",
    "MAX_HEX_VALUE",
    "REPLACEMENT_CHARACTER",
    "format_header",
    "format_hex",
    "is_printable",
    "parse_hex",
    "to_char",
]
